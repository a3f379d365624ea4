"""Parser combinators and the parsers used to read editor commands."""

from __future__ import annotations

import math
import re
import string
import sys
from pathlib import Path
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from pixelkit.color import Rgba8
from pixelkit.platform import InputState, Key

T = TypeVar("T")
U = TypeVar("U")

_U32_MAX = 0xFFFFFFFF
_IDENTIFIER_CHARS = frozenset(string.ascii_letters + "/-")


class ParseError(Exception):
    """Raised when input does not match a parser.

    ``remaining`` is the input left where the failure happened; ``expected``
    marks a plain mismatch, as opposed to input that matched but was rejected.
    """

    def __init__(self, message: str, remaining: str = "", expected: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.remaining = remaining
        self.expected = expected


class Parser(Generic[T]):
    """A parser turning the start of a string into a value and the rest of the string."""

    def __init__(self, fn: Callable[[str], Tuple[T, str]]) -> None:
        self._fn = fn

    def parse(self, text: str) -> Tuple[T, str]:
        """Parse the start of ``text``, returning the value and the unparsed rest."""
        return self._fn(text)

    def map(self, f: Callable[[T], U]) -> "Parser[U]":
        """Transform the parsed value."""

        def run(text: str) -> Tuple[U, str]:
            value, rest = self._fn(text)
            return f(value), rest

        return Parser(run)

    def try_map(self, f: Callable[[T], U]) -> "Parser[U]":
        """Transform the parsed value; a ``ValueError`` from ``f`` fails the parse."""

        def run(text: str) -> Tuple[U, str]:
            value, rest = self._fn(text)
            try:
                return f(value), rest
            except ValueError as e:
                raise ParseError(str(e), text) from e

        return Parser(run)

    def then(self, other: "Parser[U]") -> "Parser[Tuple[T, U]]":
        """Parse this and then ``other``, yielding both values."""

        def run(text: str) -> Tuple[Tuple[T, U], str]:
            first, rest = self._fn(text)
            second, rest = other.parse(rest)
            return (first, second), rest

        return Parser(run)

    def skip(self, other: "Parser[Any]") -> "Parser[T]":
        """Parse this and then ``other``, keeping only this value."""

        def run(text: str) -> Tuple[T, str]:
            value, rest = self._fn(text)
            _, rest = other.parse(rest)
            return value, rest

        return Parser(run)

    def label(self, name: str) -> "Parser[T]":
        """Report plain mismatches as ``expected <name>``."""

        def run(text: str) -> Tuple[T, str]:
            try:
                return self._fn(text)
            except ParseError as e:
                if e.expected:
                    raise ParseError(f"expected {name}", text, expected=True) from e
                raise

        return Parser(run)

    def or_else(self, other: "Parser[T]") -> "Parser[T]":
        """Try this parser, falling back to ``other`` on the same input."""

        def run(text: str) -> Tuple[T, str]:
            try:
                return self._fn(text)
            except ParseError:
                return other.parse(text)

        return Parser(run)


# Primitives ---------------------------------------------------------------


def _satisfy(pred: Callable[[str], bool], name: str) -> Parser[str]:
    def run(text: str) -> Tuple[str, str]:
        if text and pred(text[0]):
            return text[0], text[1:]
        raise ParseError(f"expected {name}", text, expected=True)

    return Parser(run)


def _repeat(p: Parser[T], minimum: int) -> Parser[List[T]]:
    def run(text: str) -> Tuple[List[T], str]:
        values: List[T] = []
        rest = text
        while True:
            try:
                value, after = p.parse(rest)
            except ParseError:
                if len(values) < minimum:
                    raise
                return values, rest
            values.append(value)
            if after == rest:
                return values, rest
            rest = after

    return Parser(run)


def _chars(p: Parser[str], minimum: int = 1) -> Parser[str]:
    return _repeat(p, minimum).map("".join)


def _symbol(c: str) -> Parser[str]:
    return _satisfy(lambda ch: ch == c, f"'{c}'")


def _string(s: str) -> Parser[str]:
    def run(text: str) -> Tuple[str, str]:
        if text.startswith(s):
            return s, text[len(s):]
        raise ParseError(f"expected '{s}'", text, expected=True)

    return Parser(run)


def _optional(p: Parser[T]) -> Parser[Optional[T]]:
    def run(text: str) -> Tuple[Optional[T], str]:
        try:
            return p.parse(text)
        except ParseError:
            return None, text

    return Parser(run)


def _end() -> Parser[None]:
    def run(text: str) -> Tuple[None, str]:
        if text:
            raise ParseError("expected end of input", text, expected=True)
        return None, text

    return Parser(run)


def _until(p: Parser[Any]) -> Parser[str]:
    """Collect characters up to where ``p`` matches, without consuming ``p``."""

    def run(text: str) -> Tuple[str, str]:
        for i in range(len(text) + 1):
            try:
                p.parse(text[i:])
            except ParseError:
                continue
            return text[:i], text[i:]
        raise ParseError("unexpected end of input", "", expected=True)

    return Parser(run)


def _between(open_: str, close: str, p: Parser[T]) -> Parser[T]:
    return _symbol(open_).then(p).skip(_symbol(close)).map(lambda pair_: pair_[1])


def _regex(pattern: str, name: str) -> Parser[str]:
    compiled = re.compile(pattern)

    def run(text: str) -> Tuple[str, str]:
        m = compiled.match(text)
        if not m:
            raise ParseError(f"expected {name}", text, expected=True)
        return m.group(0), text[m.end():]

    return Parser(run)


def _character() -> Parser[str]:
    return _satisfy(lambda _c: True, "<character>")


def _letter() -> Parser[str]:
    return _satisfy(str.isalpha, "<letter>")


def _check_u32(value: str) -> int:
    number = int(value)
    if number > _U32_MAX:
        raise ValueError(f"integer {value} is out of range")
    return number


def _integer() -> Parser[int]:
    return _regex(r"\d+", "<integer>").try_map(_check_u32)


def _rational() -> Parser[float]:
    return _regex(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", "<rational>").map(float)


# Command parsers ----------------------------------------------------------


def identifier() -> Parser[str]:
    """One or more ASCII letters, ``/`` or ``-``."""
    return _chars(_satisfy(lambda c: c in _IDENTIFIER_CHARS, "<identifier>")).label(
        "<identifier>"
    )


def word() -> Parser[str]:
    """One or more letters."""
    return _chars(_letter())


def token() -> Parser[str]:
    """One or more non-whitespace characters."""
    return _chars(_satisfy(lambda c: not c.isspace(), "!<whitespace>"))


def whitespace() -> Parser[str]:
    """One or more whitespace characters."""
    return _chars(_satisfy(str.isspace, "<whitespace>"))


def comment() -> Parser[str]:
    """A ``--`` comment, yielding its text up to the end of input."""
    return (
        _string("--")
        .skip(_optional(whitespace()))
        .then(_until(_end()))
        .map(lambda pair_: pair_[1])
    )


def scale() -> Parser[int]:
    """A scale written as ``@<n>x``."""
    return (
        _symbol("@")
        .then(_integer())
        .skip(_symbol("x"))
        .label("@<scale>")
        .map(lambda pair_: pair_[1])
    )


def _expand_home(text: str) -> str:
    if sys.platform != "win32" and text.startswith("~"):
        try:
            home = Path.home()
        except (RuntimeError, KeyError, OSError):
            return text
        return str(home) + text[1:]
    return text


def path() -> Parser[str]:
    """A path token; on Unix a leading ``~`` is replaced by the home directory."""
    return token().map(_expand_home).label("<path>")


_CONTROL_KEYS = {
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "ctrl": Key.CONTROL,
    "alt": Key.ALT,
    "shift": Key.SHIFT,
    "space": Key.SPACE,
    "return": Key.RETURN,
    "backspace": Key.BACKSPACE,
    "tab": Key.TAB,
    "end": Key.END,
    "esc": Key.ESCAPE,
}


def _control_key(name: str) -> Key:
    try:
        return _CONTROL_KEYS[name]
    except KeyError:
        raise ValueError(f"unknown key <{name}>") from None


def _char_key(c: str) -> Key:
    k = Key.from_char(c)
    if k is Key.UNKNOWN:
        raise ValueError(f"unknown key {c!r}")
    return k


def key() -> Parser[Key]:
    """A key: a single character or a named key such as ``<up>``."""
    control = _between("<", ">", _chars(_letter(), 0)).try_map(_control_key)
    alphanum = _character().try_map(_char_key)
    return control.or_else(alphanum).label("<key>")


_INPUT_STATES = {
    "pressed": InputState.PRESSED,
    "released": InputState.RELEASED,
    "repeated": InputState.REPEATED,
}


def _input_state(name: str) -> InputState:
    try:
        return _INPUT_STATES[name]
    except KeyError:
        raise ValueError(f"unknown input state: {name}") from None


def input_state() -> Parser[InputState]:
    """``pressed``, ``released`` or ``repeated``."""
    return word().try_map(_input_state)


def _alpha_byte(a: float) -> int:
    scaled = a * 0xFF
    if math.isnan(scaled):
        return 0
    return int(min(max(scaled, 0), 0xFF))


def _to_color(text: str) -> Rgba8:
    if not text:
        raise ValueError("expected color")
    if len(text) < 7:
        raise ValueError(f'"{text}" is not a valid color value')
    code, alpha = text[:7], text[7:]
    try:
        c = Rgba8.from_hex(code)
    except ValueError:
        raise ValueError(f"malformed color value `{code}`") from None
    try:
        (_, a), _rest = _symbol("/").then(_rational()).parse(alpha)
    except ParseError:
        return c
    return c.alpha(_alpha_byte(a))


def color() -> Parser[Rgba8]:
    """A colour ``#rrggbb``, optionally followed by ``/<alpha>`` with alpha in 0..1."""
    return token().try_map(_to_color).label("<color>")


def quoted() -> Parser[str]:
    """Text between double quotes."""
    return _between('"', '"', _until(_symbol('"')))


def paths() -> Parser[List[str]]:
    """Zero or more whitespace-separated paths."""
    return _repeat(path().skip(_optional(whitespace())), 0).label("<path>..")


def setting() -> Parser[str]:
    """The name of a setting."""
    return identifier().label("<setting>")


def pair(x: Parser[T], y: Parser[U]) -> Parser[Tuple[T, U]]:
    """Two values separated by whitespace."""
    return x.skip(whitespace()).then(y)