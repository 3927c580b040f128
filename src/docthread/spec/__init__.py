from .models import (
    DocComment,
    InlineReplacement,
    LinkDescriptor,
    NamePathElement,
    ParamSpec,
    Section,
)
from .errors import JsDocError, JsDocSyntaxError, MalformedBlockError
from .protocols import (
    BlockParserProtocol,
    CommentStripperProtocol,
    DocCommentExtractorProtocol,
    InlineLinkParserProtocol,
    LinkRenderer,
)

__all__ = [
    "BlockParserProtocol",
    "CommentStripperProtocol",
    "DocCommentExtractorProtocol",
    "InlineLinkParserProtocol",
    "LinkRenderer",
    "DocComment",
    "InlineReplacement",
    "LinkDescriptor",
    "NamePathElement",
    "ParamSpec",
    "Section",
    # Errors
    "JsDocError",
    "JsDocSyntaxError",
    "MalformedBlockError",
]
