"""Reconciliation: declared selectors minus used identifiers, by bare name."""

from __future__ import annotations

from typing import Iterable

from deadcss.model.selector import Selector, SelectorKind, UsedIdentifier


def used_names(used: Iterable[UsedIdentifier]) -> frozenset[str]:
    return frozenset(u.name for u in used)


def find_unused(
    selectors: Iterable[Selector], used: Iterable[UsedIdentifier]
) -> list[Selector]:
    """Return the selectors whose name no component uses, in input order.

    Usage is pooled across dialects and does not distinguish class from id:
    a used ``btn`` suppresses both ``.btn`` and ``#btn``.
    """
    names = used_names(used)
    return [s for s in selectors if s.name not in names]


def distinct_unused(unused: Iterable[Selector]) -> list[Selector]:
    """First occurrence of each (kind, name) pair, in input order."""
    seen: set[tuple[SelectorKind, str]] = set()
    distinct: list[Selector] = []
    for selector in unused:
        key = (selector.kind, selector.name)
        if key in seen:
            continue
        seen.add(key)
        distinct.append(selector)
    return distinct
