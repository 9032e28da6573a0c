from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


AttrMap = dict[str, str]


@dataclass(frozen=True)
class Node:
    """Common base of Element and Text, never instantiated on its own."""
    children: tuple['Node', ...] = ()

    def __post_init__(self) -> None:
        if type(self) is Node:
            raise TypeError("Node is abstract, use Element or Text")


@dataclass(frozen=True)
class Element(Node):
    tag: str = ""
    attributes: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        # read-only view over a private copy
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    def __hash__(self) -> int:
        return hash((self.tag, frozenset(self.attributes.items()), self.children))

    def __repr__(self) -> str:
        if not self.attributes:
            return f"<{self.tag}>"
        return f"<{self.tag} {self.attribute_str}>"

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            attrs.append(f'{key}="{value}"')
        return " ".join(attrs)


@dataclass(frozen=True)
class Text(Node):
    text: str = ""

    def __repr__(self) -> str:
        return repr(self.text)


def make_text(data: str) -> Text:
    return Text(text=data)


def make_element(
    tag: str,
    attributes: Mapping[str, str],
    children: Iterable[Node],
) -> Element:
    """
    Build an element from already-parsed parts.

    No validation happens here, the parser is responsible for that.
    """
    return Element(tag=tag, attributes=attributes, children=tuple(children))
