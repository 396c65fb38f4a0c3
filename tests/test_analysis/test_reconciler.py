"""Tests for unused-selector reconciliation."""

from deadcss.analysis.reconciler import distinct_unused, find_unused, used_names
from deadcss.model.selector import Selector, SelectorKind, UsedIdentifier


def _sel(name: str, kind: SelectorKind = SelectorKind.CLASS, line: int = 1) -> Selector:
    return Selector(kind=kind, name=name, file="a.css", line=line, column=1)


def _used(*names: str) -> list[UsedIdentifier]:
    return [UsedIdentifier(name=n, file="App.tsx") for n in names]


class TestFindUnused:
    def test_unused_preserves_order(self):
        selectors = [_sel("c"), _sel("a"), _sel("b")]
        assert find_unused(selectors, _used("a")) == [selectors[0], selectors[2]]

    def test_everything_used(self):
        assert find_unused([_sel("a"), _sel("b")], _used("b", "a")) == []

    def test_nothing_used(self):
        selectors = [_sel("a")]
        assert find_unused(selectors, []) == selectors

    def test_namespaces_are_shared(self):
        class_btn = _sel("btn")
        id_btn = _sel("btn", SelectorKind.ID)
        # An id usage suppresses the class of the same name, and vice versa.
        assert find_unused([class_btn, id_btn], _used("btn")) == []

    def test_duplicates_are_kept(self):
        selectors = [_sel("x", line=1), _sel("x", line=5)]
        assert find_unused(selectors, []) == selectors

    def test_idempotent(self):
        selectors = [_sel("a"), _sel("b"), _sel("c")]
        used = _used("b")
        assert find_unused(selectors, used) == find_unused(selectors, used)

    def test_more_usage_never_adds_unused(self):
        selectors = [_sel("a"), _sel("b"), _sel("c")]
        fewer = find_unused(selectors, _used("a"))
        more = find_unused(selectors, _used("a", "c", "unrelated"))
        assert set(more) <= set(fewer)

    def test_added_usage_removes_exactly_that_name(self):
        selectors = [_sel("a"), _sel("c", line=2), _sel("b"), _sel("c", SelectorKind.ID, line=8)]
        fewer = find_unused(selectors, _used("a"))
        more = find_unused(selectors, _used("a", "c"))
        removed = [s for s in fewer if s not in more]
        assert removed == [selectors[1], selectors[3]]
        assert more == [selectors[2]]

    def test_accepts_iterators(self):
        selectors = [_sel("a"), _sel("b")]
        assert find_unused(iter(selectors), iter(_used("a"))) == [selectors[1]]


class TestUsedNames:
    def test_deduplicates(self):
        assert used_names(_used("a", "a", "b")) == frozenset({"a", "b"})


class TestDistinctUnused:
    def test_first_occurrence_per_kind_and_name(self):
        first = _sel("x", line=1)
        selectors = [first, _sel("x", line=4), _sel("x", SelectorKind.ID, line=9)]
        assert distinct_unused(selectors) == [first, selectors[2]]
