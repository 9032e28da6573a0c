import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from kodama.errors import (
    TagMismatch, UnexpectedCharacter, UnexpectedEndOfInput,
    UnterminatedAttributeValue
)
from kodama.node import AttrMap, Element, Node, make_element, make_text


logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")

ROOT_TAG = "html"

# parse_nodes -> parse_node -> parse_element per open element
FRAMES_PER_LEVEL = 3


def print_tree(node: Node, indent: int = 0, file: TextIO | None = None) -> None:
    print(" " * indent, node, file=file or sys.stdout)
    for child in node.children:
        print_tree(child, indent + 2, file=file)


@contextmanager
def recursion_budget(depth: int) -> Iterator[None]:
    """Allow `depth` more levels of element nesting on top of the current limit."""
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(old_limit + FRAMES_PER_LEVEL * depth)
    try:
        yield
    finally:
        sys.setrecursionlimit(old_limit)


def is_name_char(c: str) -> bool:
    # ASCII only, str.isalnum() would also accept e.g. "é" or "٣"
    return c.isascii() and c.isalnum()


@dataclass
class Parser:
    """
    Single-pass recursive-descent parser over one input string.

    `pos` indexes code points, so every character, multi-byte or not, is
    exactly one step of the cursor.
    """
    input: str = ""
    pos: int = 0

    def next_char(self) -> str:
        if self.eof():
            raise UnexpectedEndOfInput(self.pos)
        return self.input[self.pos]

    def starts_with(self, s: str) -> bool:
        return self.input.startswith(s, self.pos)

    def eof(self) -> bool:
        return self.pos >= len(self.input)

    def consume_char(self) -> str:
        c = self.next_char()
        self.pos += 1
        return c

    def expect(self, literal: str) -> None:
        c = self.next_char()
        if c != literal:
            raise UnexpectedCharacter(repr(literal), c, self.pos)
        self.pos += 1

    def consume_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.eof() and test(self.input[self.pos]):
            self.pos += 1
        return self.input[start:self.pos]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def parse_tag_name(self) -> str:
        return self.consume_while(is_name_char)

    def parse_node(self) -> Node:
        if self.next_char() == '<':
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Node:
        return make_text(self.consume_while(lambda c: c != '<'))

    def parse_element(self) -> Element:
        self.expect('<')
        tag = self.parse_tag_name()
        attributes = self.parse_attributes()
        self.expect('>')

        children = self.parse_nodes()

        self.expect('<')
        self.expect('/')
        closing_pos = self.pos
        closing_tag = self.parse_tag_name()
        if closing_tag != tag:
            raise TagMismatch(tag, closing_tag, closing_pos)
        self.expect('>')

        return make_element(tag, attributes, children)

    def parse_attr(self) -> tuple[str, str]:
        name = self.parse_tag_name()
        self.consume_whitespace()
        self.expect('=')
        self.consume_whitespace()
        value = self.parse_attr_value()
        return (name, value)

    def parse_attr_value(self) -> str:
        open_pos = self.pos
        quote = self.consume_char()
        if quote not in QUOTE_CHARS:
            raise UnexpectedCharacter("a quote", quote, open_pos)
        value = self.consume_while(lambda c: c != quote)
        if self.eof():
            raise UnterminatedAttributeValue(quote, open_pos)
        self.expect(quote)
        return value

    def parse_attributes(self) -> AttrMap:
        attributes: AttrMap = {}
        while True:
            self.consume_whitespace()
            if self.next_char() == '>':
                break
            name, value = self.parse_attr()
            # a repeated name overwrites the earlier value
            attributes[name] = value
        return attributes

    def parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        while True:
            self.consume_whitespace()
            if self.eof() or self.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes


def parse(source: str) -> Node:
    """
    Parse `source` and return its root node.

    A document with exactly one top-level node is returned as is, anything
    else is wrapped in a synthetic <html> element. The recursion limit is
    raised for the duration of the call so that deeply nested documents
    parse, and restored afterwards.

    Raises:
        ParseError: on any structural violation. Nothing is returned in that
        case, not even a partial tree.
    """
    logger.debug("Parsing %d characters", len(source))
    parser = Parser(input=source)
    with recursion_budget(source.count("<")):
        nodes = parser.parse_nodes()

    if not parser.eof():
        # only a stray closing tag can stop the top level early
        raise UnexpectedCharacter("end of input", parser.next_char(), parser.pos)

    if len(nodes) == 1:
        logger.debug("Parsed a single root node")
        return nodes[0]

    logger.debug("Wrapping %d top-level nodes in <%s>", len(nodes), ROOT_TAG)
    return make_element(ROOT_TAG, {}, nodes)
