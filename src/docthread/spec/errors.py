class JsDocError(Exception):
    pass


class JsDocSyntaxError(JsDocError):
    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} (at offset {offset})")


class MalformedBlockError(JsDocSyntaxError):
    def __init__(self, offset: int = 0):
        super().__init__("syntax error parsing JSDoc - missing '*/'", offset)
