"""Cursor over document text used by the scanner."""

import re

_WHITESPACE = " \t\r\n\f"


class _TextStream:
    """Forward-only cursor with regex and character helpers."""

    def __init__(self, text: str, position: int = 0):
        self.source = text
        self.length = len(text)
        self.position = position

    def eos(self) -> bool:
        return self.length <= self.position

    def advance(self, n: int) -> None:
        self.position += n

    def go_back(self, n: int) -> None:
        self.position -= n

    def go_back_to(self, position: int) -> None:
        self.position = position

    def peek_char(self, n: int = 0) -> str:
        index = self.position + n
        return self.source[index] if 0 <= index < self.length else ""

    def advance_if_char(self, ch: str) -> bool:
        if self.peek_char() == ch:
            self.position += 1
            return True
        return False

    def advance_if_chars(self, chars: str) -> bool:
        if self.source.startswith(chars, self.position):
            self.position += len(chars)
            return True
        return False

    def advance_if_regexp(self, pattern: re.Pattern) -> str:
        """Consume and return the match of pattern at the cursor, or ""."""
        match = pattern.match(self.source, self.position)
        if not match:
            return ""
        self.position = match.end()
        return match.group(0)

    def advance_until_regexp(self, pattern: re.Pattern) -> str:
        """Advance to the next match of pattern; to the end if there is none."""
        match = pattern.search(self.source, self.position)
        if match:
            self.position = match.start()
            return match.group(0)
        self.position = self.length
        return ""

    def advance_until_char(self, ch: str) -> bool:
        index = self.source.find(ch, self.position)
        if index == -1:
            self.position = self.length
            return False
        self.position = index
        return True

    def advance_until_chars(self, chars: str) -> bool:
        index = self.source.find(chars, self.position)
        if index == -1:
            self.position = self.length
            return False
        self.position = index
        return True

    def skip_whitespace(self) -> bool:
        start = self.position
        while self.position < self.length and self.source[self.position] in _WHITESPACE:
            self.position += 1
        return self.position > start
