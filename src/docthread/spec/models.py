from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple


def _compact(record: Any) -> Dict[str, Any]:
    # Absent optional fields are omitted, matching how the records are consumed.
    data: Dict[str, Any] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        data[f.name] = value
    return data


@dataclass(frozen=True)
class NamePathElement:
    """One element of a name path such as `module:foo.bar#baz`."""

    name: str
    prefix: Optional[str] = None  # e.g. "module:" or "event:"
    delimiter: Optional[str] = None  # ".", "#" or "~"; None only for the first element

    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass(frozen=True)
class ParamSpec:
    optional: bool
    name: str
    specifier: str  # e.g. "options.subprop" for name "options"
    default: Optional[str] = None


@dataclass(frozen=True)
class Section:
    """
    A block of a doc comment introduced by a directive.

    The first section of every parse result has `tag=None` and holds the
    leading description.
    """

    tag: Optional[str]
    text: str = ""
    type: Optional[str] = None
    name: Optional[str] = None
    specifier: Optional[str] = None
    optional: Optional[bool] = None
    default: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = _compact(self)
        data["tag"] = self.tag
        return data


@dataclass(frozen=True)
class LinkDescriptor:
    """An inline `{@link ...}` directive found in free text."""

    pos: int  # absolute offset of "{@"
    end: int  # absolute offset just past the closing "}"
    kind: str  # "link", "linkplain" or "linkcode"
    title: Optional[str] = None
    url: Optional[str] = None
    namepath: Optional[Tuple[NamePathElement, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = _compact(self)
        if self.namepath is not None:
            data["namepath"] = [element.to_dict() for element in self.namepath]
        return data


@dataclass(frozen=True)
class InlineReplacement:
    body: str  # text with every link replaced by "{@link N}"
    links: Tuple[LinkDescriptor, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "body": self.body,
            "links": [link.to_dict() for link in self.links],
        }


@dataclass(frozen=True)
class DocComment:
    pos: int
    end: int
    raw: str
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    @property
    def description(self) -> str:
        return self.sections[0].text if self.sections else ""

    def get_sections(self, tag: str) -> Tuple[Section, ...]:
        return tuple(s for s in self.sections if s.tag == tag)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pos": self.pos,
            "end": self.end,
            "sections": [s.to_dict() for s in self.sections],
        }
