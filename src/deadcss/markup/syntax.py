"""Tree-sitter plumbing shared by both component dialects."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser, Tree

TSX = "tsx"
TYPESCRIPT = "typescript"


@lru_cache(maxsize=None)
def _language(grammar: str) -> Language:
    if grammar == TSX:
        return Language(ts_typescript.language_tsx())
    if grammar == TYPESCRIPT:
        return Language(ts_typescript.language_typescript())
    raise ValueError(f"Unknown grammar: {grammar!r}")


def parse_source(source: str, grammar: str) -> Tree | None:
    """Parse *source* with an error-recovering tree-sitter grammar.

    The returned tree always covers the whole input; syntax errors show up as
    ``ERROR`` / missing nodes rather than exceptions.
    """
    parser = Parser(_language(grammar))
    return parser.parse(source.encode("utf-8"))


def node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")


def string_value(node: Node) -> str:
    """Content of a quoted ``string`` node without its quotes."""
    text = node_text(node)
    return text[1:-1] if len(text) >= 2 else ""


def template_fragments(node: Node) -> list[str]:
    """Static text of a ``template_string`` node, split at each ``${...}``."""
    raw = node.text or b""
    base = node.start_byte
    fragments: list[str] = []
    pos = 1  # skip the opening backtick
    for child in node.children:
        if child.type == "template_substitution":
            fragments.append(raw[pos : child.start_byte - base].decode("utf-8", errors="replace"))
            pos = child.end_byte - base
    end = len(raw) - 1 if raw.endswith(b"`") and len(raw) > 1 else len(raw)
    fragments.append(raw[pos:end].decode("utf-8", errors="replace"))
    return fragments


def has_substitutions(node: Node) -> bool:
    return any(child.type == "template_substitution" for child in node.children)


def significant_children(node: Node) -> list[Node]:
    """Named children, minus comments."""
    return [child for child in node.named_children if child.type != "comment"]


def walk(root: Node, types: frozenset[str]) -> Iterator[Node]:
    """Pre-order walk yielding nodes whose type is in *types*.

    Uses an explicit stack so deeply nested markup cannot exhaust the
    interpreter's recursion limit.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in types:
            yield node
        stack.extend(reversed(node.children))
