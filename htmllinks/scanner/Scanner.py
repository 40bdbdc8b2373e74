"""HTML markup scanner.

Turns document text into a stream of classified tokens (tags, attribute names,
attribute values, comments, content). The scanner is lenient: malformed markup
never raises, it degrades to UNKNOWN tokens and an error message on the token.
"""

import re
from collections.abc import Iterator

from .ScannerState import ScannerState
from .Token import Token
from .TokenType import TokenType
from ._TextStream import _TextStream

_ELEMENT_NAME = re.compile(r"[_:\w][_:\w\-.\d]*")
_ATTRIBUTE_NAME = re.compile(r"[^\s\"'>/=\x00-\x0F\x7F\x80-\x9F]*")
_UNQUOTED_VALUE = re.compile(r"[^\s\"'`=<>]+")
_DOCTYPE = re.compile(r"!doctype", re.IGNORECASE)
_SCRIPT_END = re.compile(r"</script\s*/?>?", re.IGNORECASE)
_STYLE_END = re.compile(r"</style\s*/?>?", re.IGNORECASE)
_LINE_BREAK = "\r\n"


class Scanner:
    """Incremental HTML scanner.

    Call scan() repeatedly until it returns TokenType.EOS; after each call the
    token_* properties describe the token just produced. Iterating the scanner
    yields Token records instead.
    """

    def __init__(self, text: str, initial_offset: int = 0, initial_state: ScannerState = ScannerState.WITHIN_CONTENT):
        self._stream = _TextStream(text, initial_offset)
        self.state = initial_state
        self._token_offset = 0
        self._token_type = TokenType.UNKNOWN
        self._token_error: str | None = None
        self._has_space_after_tag = False
        self._last_tag: str | None = None
        self._last_attribute_name: str | None = None

    @property
    def token_type(self) -> TokenType:
        return self._token_type

    @property
    def token_offset(self) -> int:
        return self._token_offset

    @property
    def token_end(self) -> int:
        return self._stream.position

    @property
    def token_length(self) -> int:
        return self._stream.position - self._token_offset

    @property
    def token_text(self) -> str:
        return self._stream.source[self._token_offset : self._stream.position]

    @property
    def token_error(self) -> str | None:
        return self._token_error

    @property
    def last_tag(self) -> str | None:
        """Lower-cased name of the most recent start tag."""
        return self._last_tag

    def scan(self) -> TokenType:
        offset = self._stream.position
        old_state = self.state
        token = self._internal_scan()
        if token is not TokenType.EOS and offset == self._stream.position:
            # Every token must consume input; skip one character if nothing moved
            self._stream.advance(1)
            self.state = old_state
            return self._finish_token(offset, TokenType.UNKNOWN, "unexpected character")
        return token

    def __iter__(self) -> Iterator[Token]:
        token = self.scan()
        while token is not TokenType.EOS:
            yield Token(token, self.token_offset, self.token_end, self.token_text)
            token = self.scan()

    def _finish_token(self, offset: int, token_type: TokenType, error: str | None = None) -> TokenType:
        self._token_type = token_type
        self._token_offset = offset
        self._token_error = error
        return token_type

    def _next_element_name(self) -> str:
        return self._stream.advance_if_regexp(_ELEMENT_NAME).lower()

    def _next_attribute_name(self) -> str:
        return self._stream.advance_if_regexp(_ATTRIBUTE_NAME).lower()

    def _internal_scan(self) -> TokenType:  # noqa: C901
        stream = self._stream
        offset = stream.position
        if stream.eos():
            return self._finish_token(offset, TokenType.EOS)

        state = self.state
        if state is ScannerState.WITHIN_COMMENT:
            if stream.advance_if_chars("-->"):
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish_token(offset, TokenType.END_COMMENT_TAG)
            stream.advance_until_chars("-->")
            return self._finish_token(offset, TokenType.COMMENT)

        if state is ScannerState.WITHIN_DOCTYPE:
            if stream.advance_if_char(">"):
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish_token(offset, TokenType.END_DOCTYPE_TAG)
            stream.advance_until_char(">")
            return self._finish_token(offset, TokenType.DOCTYPE)

        if state is ScannerState.WITHIN_CONTENT:
            if stream.advance_if_char("<"):
                if not stream.eos() and stream.peek_char() == "!":
                    if stream.advance_if_chars("!--"):
                        self.state = ScannerState.WITHIN_COMMENT
                        return self._finish_token(offset, TokenType.START_COMMENT_TAG)
                    if stream.advance_if_regexp(_DOCTYPE):
                        self.state = ScannerState.WITHIN_DOCTYPE
                        return self._finish_token(offset, TokenType.START_DOCTYPE_TAG)
                if stream.advance_if_char("/"):
                    self.state = ScannerState.AFTER_OPENING_END_TAG
                    return self._finish_token(offset, TokenType.END_TAG_OPEN)
                self.state = ScannerState.AFTER_OPENING_START_TAG
                return self._finish_token(offset, TokenType.START_TAG_OPEN)
            stream.advance_until_char("<")
            return self._finish_token(offset, TokenType.CONTENT)

        if state is ScannerState.AFTER_OPENING_END_TAG:
            if self._next_element_name():
                self.state = ScannerState.WITHIN_END_TAG
                return self._finish_token(offset, TokenType.END_TAG)
            if stream.skip_whitespace():
                return self._finish_token(offset, TokenType.WHITESPACE, "tag name must directly follow the open bracket")
            self.state = ScannerState.WITHIN_END_TAG
            stream.advance_until_char(">")
            if offset < stream.position:
                return self._finish_token(offset, TokenType.UNKNOWN, "end tag name expected")
            return self._internal_scan()

        if state is ScannerState.WITHIN_END_TAG:
            if stream.skip_whitespace():
                return self._finish_token(offset, TokenType.WHITESPACE)
            if stream.advance_if_char(">"):
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish_token(offset, TokenType.END_TAG_CLOSE)
            stream.advance(1)
            self.state = ScannerState.WITHIN_CONTENT
            return self._finish_token(offset, TokenType.UNKNOWN, "closing bracket expected")

        if state is ScannerState.AFTER_OPENING_START_TAG:
            tag = self._next_element_name()
            if tag:
                self._last_tag = tag
                self._last_attribute_name = None
                self._has_space_after_tag = False
                self.state = ScannerState.WITHIN_TAG
                return self._finish_token(offset, TokenType.START_TAG)
            if stream.skip_whitespace():
                return self._finish_token(offset, TokenType.WHITESPACE, "tag name must directly follow the open bracket")
            self.state = ScannerState.WITHIN_CONTENT
            stream.advance_until_char("<")
            if offset < stream.position:
                return self._finish_token(offset, TokenType.UNKNOWN, "start tag name expected")
            return self._internal_scan()

        if state is ScannerState.WITHIN_TAG:
            if stream.skip_whitespace():
                self._has_space_after_tag = True
                return self._finish_token(offset, TokenType.WHITESPACE)
            if self._has_space_after_tag:
                name = self._next_attribute_name()
                if name:
                    self._last_attribute_name = name
                    self._has_space_after_tag = False
                    self.state = ScannerState.AFTER_ATTRIBUTE_NAME
                    return self._finish_token(offset, TokenType.ATTRIBUTE_NAME)
            if stream.advance_if_chars("/>"):
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish_token(offset, TokenType.START_TAG_SELF_CLOSE)
            if stream.advance_if_char(">"):
                if self._last_tag == "script":
                    self.state = ScannerState.WITHIN_SCRIPT_CONTENT
                elif self._last_tag == "style":
                    self.state = ScannerState.WITHIN_STYLE_CONTENT
                else:
                    self.state = ScannerState.WITHIN_CONTENT
                return self._finish_token(offset, TokenType.START_TAG_CLOSE)
            stream.advance(1)
            return self._finish_token(offset, TokenType.UNKNOWN, "unexpected character in tag")

        if state is ScannerState.AFTER_ATTRIBUTE_NAME:
            if stream.skip_whitespace():
                self._has_space_after_tag = True
                return self._finish_token(offset, TokenType.WHITESPACE)
            if stream.advance_if_char("="):
                self.state = ScannerState.BEFORE_ATTRIBUTE_VALUE
                return self._finish_token(offset, TokenType.DELIMITER_ASSIGN)
            self.state = ScannerState.WITHIN_TAG
            return self._internal_scan()

        if state is ScannerState.BEFORE_ATTRIBUTE_VALUE:
            if stream.skip_whitespace():
                return self._finish_token(offset, TokenType.WHITESPACE)
            value = stream.advance_if_regexp(_UNQUOTED_VALUE)
            if value and value.endswith("/") and stream.peek_char() == ">":
                # <img src=a.png/> : the slash belongs to the self-closing bracket
                stream.go_back(1)
                value = value[:-1]
            if value:
                self.state = ScannerState.WITHIN_TAG
                self._has_space_after_tag = False
                return self._finish_token(offset, TokenType.ATTRIBUTE_VALUE)
            quote = stream.peek_char()
            if quote in ("'", '"'):
                return self._scan_quoted_value(offset, quote)
            self.state = ScannerState.WITHIN_TAG
            self._has_space_after_tag = False
            return self._internal_scan()

        if state is ScannerState.WITHIN_SCRIPT_CONTENT:
            return self._scan_raw_text(offset, _SCRIPT_END, TokenType.SCRIPT)

        if state is ScannerState.WITHIN_STYLE_CONTENT:
            return self._scan_raw_text(offset, _STYLE_END, TokenType.STYLES)

        stream.advance(1)
        self.state = ScannerState.WITHIN_CONTENT
        return self._finish_token(offset, TokenType.UNKNOWN)

    def _scan_quoted_value(self, offset: int, quote: str) -> TokenType:
        """Scan a quoted attribute value starting at the opening quote.

        A line break before the closing quote means no attribute value is
        recognised: only the opening quote is consumed, as an UNKNOWN token.
        A value still open at the end of input runs to the end of input.
        """
        stream = self._stream
        stream.advance(1)
        source = stream.source
        index = stream.position
        while index < stream.length:
            ch = source[index]
            if ch == quote:
                stream.go_back_to(index + 1)
                self.state = ScannerState.WITHIN_TAG
                self._has_space_after_tag = False
                return self._finish_token(offset, TokenType.ATTRIBUTE_VALUE)
            if ch in _LINE_BREAK:
                self.state = ScannerState.WITHIN_TAG
                self._has_space_after_tag = False
                return self._finish_token(offset, TokenType.UNKNOWN, "unterminated attribute value")
            index += 1
        stream.go_back_to(stream.length)
        self.state = ScannerState.WITHIN_TAG
        return self._finish_token(offset, TokenType.ATTRIBUTE_VALUE, "unterminated attribute value")

    def _scan_raw_text(self, offset: int, end_pattern: re.Pattern, token_type: TokenType) -> TokenType:
        self._stream.advance_until_regexp(end_pattern)
        if offset < self._stream.position:
            return self._finish_token(offset, token_type)
        self.state = ScannerState.WITHIN_CONTENT
        return self._internal_scan()


def create_scanner(text: str, initial_offset: int = 0) -> Scanner:
    """Create a scanner over text starting in content state."""
    return Scanner(text, initial_offset)


def tokenize(text: str) -> list[Token]:
    """Scan the whole text and return its tokens in document order."""
    return list(Scanner(text))
