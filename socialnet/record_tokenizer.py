"""
Cursor-based scanning of the user list file.

The input looks like JSON but is not parsed as JSON: a top-level ``[ ]``
holds flat ``{ }`` records whose ``"title": value`` pairs are separated by
commas, and each record is closed by a tab-indented ``}``. The scanners here
only find delimiters and hand back raw substrings; typing happens in
``user_record``.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from socialnet.errors import MalformedRecord

LIST_OPEN = "["
LIST_CLOSE = "]"
RECORD_OPEN = "{"
RECORD_CLOSE = "}"
RECORD_END = "\t"  # indentation before a record's closing brace
QUOTE = '"'
ARRAY_OPEN = "["
ARRAY_CLOSE = "]"


class RecordCursor:
    """Read position over a piece of text with stream-like helpers."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def get(self) -> str:
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def ignore(self, count: int = 1) -> None:
        self.pos = min(len(self.text), self.pos + count)

    def ignore_through(self, delim: str) -> bool:
        """Discard input up to and including ``delim``; exhaust the input if it is absent."""
        idx = self.text.find(delim, self.pos)
        if idx < 0:
            self.pos = len(self.text)
            return False
        self.pos = idx + 1
        return True

    def read_until(self, delim: str) -> Optional[str]:
        """Return text up to ``delim`` and consume the delimiter, or None if it never appears."""
        idx = self.text.find(delim, self.pos)
        if idx < 0:
            return None
        chunk = self.text[self.pos:idx]
        self.pos = idx + 1
        return chunk

    def skip_whitespace(self, extra: str = "") -> None:
        while self.peek() and (self.peek().isspace() or self.peek() in extra):
            self.pos += 1

    def rest(self) -> str:
        return self.text[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def at_record_end(self) -> bool:
        if self.peek() == RECORD_END:
            return True
        # nothing but whitespace left: records written without tab indentation
        return not self.rest().strip()

    def next_title(self) -> str:
        self.ignore_through(QUOTE)
        title = self.read_until(QUOTE)
        if title is None:
            raise MalformedRecord(f"unterminated attribute title near offset {self.pos}")
        return title

    def next_value(self) -> str:
        if not self.ignore_through(":"):
            raise MalformedRecord("attribute title is not followed by ':'")
        self.ignore()  # the space after the colon
        marker = self.get()
        if marker == QUOTE:
            delim = QUOTE
        elif marker == ARRAY_OPEN:
            delim = ARRAY_CLOSE
        else:
            raise MalformedRecord(
                f"attribute value must start with '\"' or '[', found {marker or 'end of input'!r}"
            )
        value = self.read_until(delim)
        if value is None:
            raise MalformedRecord(f"attribute value is missing its closing {delim!r}")
        return value


class RecordTokenizer:
    """Yields ``(title, raw_value)`` pairs from the text between one record's braces."""

    def __init__(self, chunk: str):
        self.cursor = RecordCursor(chunk)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        cur = self.cursor
        while not cur.at_record_end():
            title = cur.next_title()
            value = cur.next_value()
            yield title, value
            cur.ignore()  # separator: ',' between pairs, newline after the last


class ListScanner:
    """Yields the raw content of every ``{ }`` record inside the top-level list."""

    def __init__(self, text: str):
        self.cursor = RecordCursor(text)

    def __iter__(self) -> Iterator[str]:
        cur = self.cursor
        if not cur.ignore_through(LIST_OPEN):
            raise MalformedRecord("input does not contain a '[' opening the user list")
        while True:
            cur.skip_whitespace(extra=",")
            ch = cur.peek()
            if ch == LIST_CLOSE:
                return
            if not ch:
                raise MalformedRecord("input ended before the closing ']' of the user list")
            if ch != RECORD_OPEN:
                raise MalformedRecord(f"unexpected {ch!r} between user records")
            cur.ignore()
            chunk = cur.read_until(RECORD_CLOSE)
            if chunk is None:
                raise MalformedRecord("user record is missing its closing '}'")
            yield chunk
