"""Block scanner: walks stylesheet text and yields style rules with positions.

The scanner does not understand declarations. It tracks braces, comments,
strings and parentheses well enough to find every rule prelude (the text
before ``{``) and the position it starts at, descending into conditional
group at-rules and into nested rules the way SCSS and LESS allow.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from deadcss.errors import StylesheetParseError

# At-rules whose blocks hold further style rules.
GROUPING_AT_RULES = frozenset({
    "media",
    "supports",
    "document",
    "-moz-document",
    "layer",
    "container",
    "scope",
    "at-root",
    "starting-style",
})


class _Block(Enum):
    ROOT = "root"
    RULE = "rule"
    GROUP = "group"
    OPAQUE = "opaque"  # keyframes, font-face, mixins: nothing to collect


@dataclass(frozen=True)
class RuleBlock:
    """The prelude of a style rule and where it starts (1-based)."""

    prelude: str
    line: int
    column: int


class _Locator:
    """Maps string offsets to 1-based line/column pairs."""

    def __init__(self, source: str) -> None:
        self._starts = [0]
        for i, ch in enumerate(source):
            if ch == "\n":
                self._starts.append(i + 1)

    def __call__(self, offset: int) -> tuple[int, int]:
        row = bisect.bisect_right(self._starts, offset) - 1
        return row + 1, offset - self._starts[row] + 1


def _at_rule_name(prelude: str) -> str:
    name = prelude[1:].split(None, 1)[0] if len(prelude) > 1 else ""
    return name.split("(", 1)[0].lower()


def iter_rules(source: str, *, preprocessor: bool = False) -> Iterator[RuleBlock]:
    """Yield every style rule in *source*, outermost first, in source order.

    With ``preprocessor`` set, ``//`` starts a comment outside parentheses
    (SCSS and LESS). Raises :class:`StylesheetParseError` on an unterminated
    comment or unbalanced braces.
    """
    locate = _Locator(source)
    stack: list[_Block] = [_Block.ROOT]
    buf: list[str] = []
    buf_start: int | None = None
    depth = 0  # parentheses
    i = 0
    n = len(source)

    def reset() -> None:
        nonlocal buf_start
        buf.clear()
        buf_start = None

    while i < n:
        ch = source[i]

        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end < 0:
                line, column = locate(i)
                raise StylesheetParseError(
                    "Unclosed comment", line=line, column=column
                )
            buf.append(" ")
            i = end + 2
            continue

        if preprocessor and depth == 0 and source.startswith("//", i):
            end = source.find("\n", i)
            i = n if end < 0 else end
            continue

        if preprocessor and source.startswith(("#{", "@{"), i):
            # Preprocessor interpolation; its braces are not blocks.
            end = source.find("}", i + 2)
            j = n if end < 0 else end + 1
            if buf_start is None:
                buf_start = i
            buf.append(source[i:j])
            i = j
            continue

        if ch in "\"'":
            j = i + 1
            while j < n and source[j] != ch and source[j] != "\n":
                j += 2 if source[j] == "\\" else 1
            j = min(j + 1, n)
            if buf_start is None:
                buf_start = i
            buf.append(source[i:j])
            i = j
            continue

        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            reset()
            i += 1
            continue
        elif ch == "{":
            prelude = "".join(buf).strip()
            parent = stack[-1]
            if parent is _Block.OPAQUE:
                stack.append(_Block.OPAQUE)
            elif prelude.startswith("@"):
                if _at_rule_name(prelude) in GROUPING_AT_RULES:
                    stack.append(_Block.GROUP)
                else:
                    stack.append(_Block.OPAQUE)
            else:
                if prelude and buf_start is not None:
                    line, column = locate(buf_start)
                    yield RuleBlock(prelude=prelude, line=line, column=column)
                stack.append(_Block.RULE)
            reset()
            depth = 0
            i += 1
            continue
        elif ch == "}":
            if len(stack) == 1:
                line, column = locate(i)
                raise StylesheetParseError(
                    "Unexpected }", line=line, column=column
                )
            stack.pop()
            reset()
            depth = 0
            i += 1
            continue

        if buf_start is None and not ch.isspace():
            buf_start = i
        buf.append(ch)
        i += 1

    if len(stack) > 1:
        line, column = locate(n)
        raise StylesheetParseError("Unclosed block", line=line, column=column)
