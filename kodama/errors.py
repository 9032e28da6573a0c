from enum import Enum


class ParseErrorKind(Enum):
    UNEXPECTED_EOF = 1
    UNEXPECTED_CHARACTER = 2
    TAG_MISMATCH = 3
    UNTERMINATED_ATTRIBUTE_VALUE = 4


class ParseError(ValueError):
    """
    Raised when the input is not well-formed.

    The parser never recovers: any ParseError aborts the whole parse and
    no partial tree is returned.
    """
    kind: ParseErrorKind

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class UnexpectedEndOfInput(ParseError):
    kind = ParseErrorKind.UNEXPECTED_EOF

    def __init__(self, position: int) -> None:
        super().__init__("Unexpected end of input", position)


class UnexpectedCharacter(ParseError):
    kind = ParseErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, expected: str, found: str, position: int) -> None:
        super().__init__(
            "Expected {}, found {!r}".format(expected, found), position
        )
        self.expected = expected
        self.found = found


class TagMismatch(ParseError):
    kind = ParseErrorKind.TAG_MISMATCH

    def __init__(self, expected: str, found: str, position: int) -> None:
        super().__init__(
            "Closing tag </{}> does not match <{}>".format(found, expected),
            position,
        )
        self.expected = expected
        self.found = found


class UnterminatedAttributeValue(UnexpectedEndOfInput):
    kind = ParseErrorKind.UNTERMINATED_ATTRIBUTE_VALUE

    def __init__(self, quote: str, position: int) -> None:
        # skip UnexpectedEndOfInput.__init__ to keep a specific message
        ParseError.__init__(
            self, "Attribute value opened with {} is never closed".format(quote),
            position,
        )
        self.quote = quote
