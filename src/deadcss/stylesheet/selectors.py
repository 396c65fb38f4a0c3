"""Lark-based parser that pulls class and id names out of one selector."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from deadcss.errors import StylesheetParseError
from deadcss.model.selector import SelectorKind

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n]?|(.))", re.DOTALL)

# Replacement for code points an escape may not produce.
REPLACEMENT_CHARACTER = "\ufffd"

SelectorRef = tuple[SelectorKind, str]


def _code_point(hex_digits: str) -> str:
    value = int(hex_digits, 16)
    if value == 0 or 0xD800 <= value <= 0xDFFF or value > 0x10FFFF:
        return REPLACEMENT_CHARACTER
    return chr(value)


def _unescape(raw: str) -> str:
    """Resolve CSS escapes (``\\:`` or ``\\31``) in an identifier.

    Hex escapes naming NUL, a surrogate or a value past U+10FFFF become
    U+FFFD.
    """
    if "\\" not in raw:
        return raw
    return _ESCAPE_RE.sub(
        lambda m: _code_point(m.group(1)) if m.group(1) else m.group(2),
        raw,
    )


def _flatten(items: list[object]) -> list[SelectorRef]:
    refs: list[SelectorRef] = []
    for item in items:
        if isinstance(item, list):
            refs.extend(item)
    return refs


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Collapse a selector parse tree into ``(kind, name)`` pairs.

    Class and id components produce one pair each. Functional pseudo-classes
    such as ``:not(.a)`` contribute whatever their argument list declares;
    every other component contributes nothing.
    """

    def class_selector(self, items: list[Token]) -> list[SelectorRef]:
        return [(SelectorKind.CLASS, _unescape(str(items[0])))]

    def id_selector(self, items: list[Token]) -> list[SelectorRef]:
        return [(SelectorKind.ID, _unescape(str(items[0])))]

    def pseudo(self, items: list[object]) -> list[SelectorRef]:
        return _flatten(items)

    def complex_selector(self, items: list[object]) -> list[SelectorRef]:
        return _flatten(items)

    def selector_list(self, items: list[object]) -> list[SelectorRef]:
        return _flatten(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="selector_list",
    )


def parse_selector(text: str) -> list[SelectorRef]:
    """Parse one selector (or selector list) into ``(kind, name)`` pairs.

    Pairs come out in source order and may repeat. Raises
    :class:`StylesheetParseError` when *text* is not valid selector syntax.
    """
    try:
        tree = _parser().parse(text)
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        raise StylesheetParseError(
            f"Cannot read selector {text!r}", details=str(e.orig_exc)
        ) from e
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise StylesheetParseError(str(e), line=line, column=column) from e


def split_selector_list(prelude: str) -> list[str]:
    """Split a rule prelude at top-level commas.

    Commas inside parentheses, brackets or quotes (``:is(.a, .b)``,
    ``[title="a,b"]``) do not split. Empty pieces are dropped.
    """
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    start = 0
    i = 0
    while i < len(prelude):
        ch = prelude[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append(prelude[start:i])
            start = i + 1
        i += 1
    parts.append(prelude[start:])
    return [p.strip() for p in parts if p.strip()]
