"""Parser for brace-structured parameter files.

The format is a sequence of whitespace-separated entries::

    key = value
    key = [ item item item ]
    key = { nested entries }

Any token containing ``#`` starts a comment running to the end of the line.
"""

from __future__ import annotations

import enum
import os
from collections import deque
from collections.abc import Iterable

from latticefields.parampack import ParameterPack


class ParseError(ValueError):
    """A parameter file could not be parsed."""

    def __init__(self, key: str, line: str, problem: str) -> None:
        self.key = key
        self.line = line
        super().__init__(f"{problem}\n  current line: {line}")


class IncompleteEntryError(ParseError):
    """An entry ended before its value."""

    def __init__(self, key: str, line: str) -> None:
        super().__init__(key, line, f'key "{key}" has incomplete declaration')


class MissingDelimiterError(ParseError):
    """An entry's key is not followed by ``=``."""

    def __init__(self, key: str, line: str) -> None:
        super().__init__(key, line, f'key "{key}" is missing its "=" delimiter')


class MissingBracketError(ParseError):
    """A vector was not closed with ``]``."""

    def __init__(self, key: str, line: str) -> None:
        super().__init__(key, line, f'Vector "{key}" is missing its closing bracket')


class MissingBraceError(ParseError):
    """A nested pack was not closed with ``}``."""

    def __init__(self, key: str, line: str) -> None:
        super().__init__(key, line, f'ParameterPack "{key}" is missing its closing brace')


class TokenStream:
    """Whitespace-delimited tokens from a text stream, with comments removed."""

    COMMENT_CHARS = "#"

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)
        self._line = ""
        self._tokens: deque[str] = deque()

    def next_token(self) -> str | None:
        """The next token, or None once the stream is exhausted."""
        while True:
            if self._tokens:
                token = self._tokens.popleft()
                if any(c in token for c in self.COMMENT_CHARS):
                    # drop the comment token and the rest of its line
                    self._line = ""
                    self._tokens.clear()
                    continue
                return token
            line = next(self._lines, None)
            if line is None:
                return None
            self._line = line.rstrip("\r\n")
            self._tokens = deque(self._line.split())

    def current_line(self) -> str:
        return self._line


class _Status(enum.Enum):
    SUCCESS = enum.auto()
    END_OF_STREAM = enum.auto()
    CLOSING_BRACE = enum.auto()


class InputParser:
    """Reads parameter files into :class:`ParameterPack` trees."""

    def parse_file(self, path: str | os.PathLike) -> ParameterPack:
        """Parse the file at ``path`` into a pack named after the path."""
        with open(path) as fin:
            return self.parse_stream(fin, str(path))

    def parse_stream(self, stream: Iterable[str], name: str = "") -> ParameterPack:
        """Parse every entry of a text stream into a pack called ``name``."""
        pack = ParameterPack(name)
        tokens = TokenStream(stream)
        # a stray closing brace at top level is skipped
        while self._parse_entry(tokens, pack) is not _Status.END_OF_STREAM:
            pass
        return pack

    def _parse_entry(self, tokens: TokenStream, pack: ParameterPack) -> _Status:
        key = tokens.next_token()
        if key is None:
            return _Status.END_OF_STREAM
        if key == "}":
            return _Status.CLOSING_BRACE

        delimiter = tokens.next_token()
        if delimiter is None:
            raise IncompleteEntryError(key, tokens.current_line())
        if delimiter != "=":
            raise MissingDelimiterError(key, tokens.current_line())

        token = tokens.next_token()
        if token is None:
            raise IncompleteEntryError(key, tokens.current_line())
        if token == "[":
            items = self._parse_vector(tokens)
            if items is None:
                raise MissingBracketError(key, tokens.current_line())
            pack.insert_vector(key, items)
        elif token == "{":
            sub = ParameterPack(key)
            if not self._parse_pack(tokens, sub):
                raise MissingBraceError(key, tokens.current_line())
            pack.insert_pack(key, sub)
        else:
            pack.insert_value(key, token)
        return _Status.SUCCESS

    @staticmethod
    def _parse_vector(tokens: TokenStream) -> list[str] | None:
        """Items up to the closing bracket, or None if the stream ends first."""
        items: list[str] = []
        while True:
            token = tokens.next_token()
            if token is None:
                return None
            if token == "]":
                return items
            items.append(token)

    def _parse_pack(self, tokens: TokenStream, pack: ParameterPack) -> bool:
        """Fill ``pack`` up to its closing brace; False if the stream ends first."""
        while True:
            status = self._parse_entry(tokens, pack)
            if status is _Status.CLOSING_BRACE:
                return True
            if status is _Status.END_OF_STREAM:
                return False