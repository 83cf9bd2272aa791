"""A small JSON reader and writer for the subset the server sends.

Strings carry no escape sequences, numbers have no exponent, and containers
must hold at least one element.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from gpbot.errors import DuplicateError, InvalidArgsError, InvalidJsonError
from gpbot.strings import format_float, format_int

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            raise InvalidJsonError(f"expected {ch!r} at offset {self.pos}")
        self.pos += 1

    def take_until(self, delim: str) -> str:
        end = self.text.find(delim, self.pos)
        if end < 0:
            chunk = self.text[self.pos :]
            self.pos = len(self.text)
        else:
            chunk = self.text[self.pos : end]
            self.pos = end + 1
        return chunk

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def value(self) -> Any:
        self.skip_whitespace()
        ch = self.peek()
        if not ch:
            raise InvalidJsonError("unexpected end of input")
        if ch == "{":
            return self.object()
        if ch == "[":
            return self.array()
        if ch == '"':
            self.pos += 1
            return self.take_until('"')
        if _is_digit(ch) or ch in ".-":
            return self.number()
        token = self.take_while(_is_alnum)
        if token == "true":
            return True
        if token == "false":
            return False
        if token == "null":
            return None
        raise InvalidJsonError(f"unexpected token {token!r} at offset {self.pos}")

    def object(self) -> dict[str, Any]:
        self.expect("{")
        result: dict[str, Any] = {}
        while True:
            self.skip_whitespace()
            self.expect('"')
            key = self.take_until('"')
            self.skip_whitespace()
            self.expect(":")
            item = self.value()
            if not key:
                raise InvalidArgsError("object keys must not be empty")
            if key in result:
                raise DuplicateError(f"duplicate key {key!r}")
            result[key] = item
            self.skip_whitespace()
            if self.peek() != ",":
                break
            self.pos += 1
        self.expect("}")
        return result

    def array(self) -> list[Any]:
        self.expect("[")
        result: list[Any] = []
        while True:
            result.append(self.value())
            self.skip_whitespace()
            if self.peek() != ",":
                break
            self.pos += 1
        self.expect("]")
        return result

    def number(self) -> float:
        negative = self.peek() == "-"
        if negative:
            self.pos += 1
        whole = self.take_while(_is_digit)
        fraction = ""
        if self.peek() == ".":
            self.pos += 1
            fraction = self.take_while(_is_digit)
        number = float(f"{whole or '0'}.{fraction or '0'}")
        return -number if negative else number


def parse_json_prefix(text: str) -> tuple[Any, str]:
    """Parse one value at the start of text; return it and the unread rest."""
    parser = _Parser(text)
    value = parser.value()
    return value, text[parser.pos :]


def parse_json(text: str) -> Any:
    """Parse text holding exactly one value, surrounding whitespace allowed."""
    value, rest = parse_json_prefix(text)
    if rest.strip(_WHITESPACE):
        raise InvalidJsonError(f"unexpected trailing text {rest.strip(_WHITESPACE)!r}")
    return value


def _dump(value: Any, out: list[str]) -> None:
    if value is None:
        out.append("null")
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, int):
        out.append(format_int(value))
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgsError(f"cannot write {value!r} as JSON")
        out.append(format_float(value))
    elif isinstance(value, str):
        out.append(f'"{value}"')
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for index, item in enumerate(value):
            if index:
                out.append(",")
            _dump(item, out)
        out.append("]")
    elif isinstance(value, dict):
        out.append("{")
        for index, (key, item) in enumerate(value.items()):
            if not isinstance(key, str):
                raise InvalidArgsError(f"object key {key!r} is not a string")
            if index:
                out.append(",")
            out.append(f'"{key}":')
            _dump(item, out)
        out.append("}")
    else:
        raise InvalidArgsError(f"cannot write {type(value).__name__} as JSON")


def dump_json(value: Any) -> str:
    """Write a value compactly, with no spaces and no string escaping."""
    out: list[str] = []
    _dump(value, out)
    return "".join(out)