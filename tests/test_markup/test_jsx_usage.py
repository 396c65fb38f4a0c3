"""Tests for className / id extraction from JSX components."""

import pytest

from deadcss.markup.jsx import JsxUsageExtractor
from deadcss.model.report import ErrorKind, ErrorLog, SourceKind
from deadcss.model.selector import UsedIdentifier


def _names(source: str, errors: ErrorLog | None = None) -> list[str]:
    log = errors if errors is not None else ErrorLog()
    used = JsxUsageExtractor().extract(source, "App.tsx", log)
    return [u.name for u in used]


def _component(markup: str) -> str:
    return f"export const App = () => (\n  {markup}\n);\n"


class TestStaticAttributes:
    def test_class_name_string(self):
        assert _names(_component('<div className="card card-body" />')) == ["card", "card-body"]

    def test_id_string(self):
        assert _names(_component('<h1 id="header">Title</h1>')) == ["header"]

    def test_records_carry_file(self):
        used = JsxUsageExtractor().extract(_component('<p className="x" />'), "src/P.jsx", ErrorLog())
        assert used == [UsedIdentifier(name="x", file="src/P.jsx")]

    def test_other_attributes_are_ignored(self):
        source = _component('<a title="nope" data-role="link" href="#top">x</a>')
        assert _names(source) == []

    def test_invalid_tokens_are_dropped(self):
        assert _names(_component('<div className="ok w-1/2 {{bad}}" />')) == ["ok"]

    def test_nested_elements(self):
        source = _component(
            '<section className="outer">\n'
            '    <ul id="list">\n'
            '      <li className="item" />\n'
            "    </ul>\n"
            "  </section>"
        )
        assert sorted(_names(source)) == ["item", "list", "outer"]


class TestExpressionShapes:
    def test_template_literal_static_parts_only(self):
        source = _component("<div className={`container ${isActive ? 'active' : ''}`} />")
        names = _names(source)
        assert "container" in names
        assert "active" not in names

    def test_css_module_member(self):
        assert _names(_component("<div className={styles.active} />")) == ["active"]

    def test_css_module_subscript(self):
        assert _names(_component("<div className={styles['nav-link']} />")) == ["nav-link"]

    def test_helper_call_with_logical_operand(self):
        source = _component("<div className={clsx('a', cond && 'b')} />")
        assert _names(source) == ["a", "b"]

    def test_helper_call_with_nested_collections(self):
        source = _component("<div className={cx('a', ['b', {'c': on}], other('d'))} />")
        assert _names(source) == ["a", "b", "c", "d"]

    def test_array(self):
        assert _names(_component("<div className={['x', 'y']} />")) == ["x", "y"]

    def test_object_string_keys_only(self):
        source = _component("<div className={{'z': on, w: on, 'p q': off}} />")
        assert _names(source) == ["z", "p", "q"]

    def test_ternary_branches(self):
        assert _names(_component("<div className={on ? 'p' : 'q'} />")) == ["p", "q"]

    def test_plain_identifier_yields_nothing(self):
        assert _names(_component("<div className={dynamicClass} />")) == []

    def test_arithmetic_concatenation_yields_nothing(self):
        assert _names(_component("<div className={'a' + suffix} />")) == []


class TestDialectCoverage:
    def test_typescript_generics(self):
        source = (
            "import React from 'react';\n"
            "import './App.css';\n"
            "type Props = { isActive: boolean };\n"
            "export const App: React.FC<Props> = ({ isActive }) => {\n"
            "  return <main className=\"layout\" />;\n"
            "};\n"
        )
        assert _names(source) == ["layout"]

    def test_plain_javascript_file(self):
        source = "export default function App() {\n  return <div className=\"app\" />;\n}\n"
        used = JsxUsageExtractor().extract(source, "App.js", ErrorLog())
        assert [u.name for u in used] == ["app"]

    def test_kind(self):
        assert JsxUsageExtractor.kind is SourceKind.JSX


class TestErrors:
    @pytest.mark.parametrize("source", ["", "   \n"])
    def test_empty_source(self, source):
        errors = ErrorLog()
        assert _names(source, errors) == []
        assert errors.total == 0

    def test_syntax_error_keeps_partial_results(self):
        errors = ErrorLog()
        source = (
            'const Good = () => <div className="kept" />;\n'
            "function broken( {\n"
        )
        assert "kept" in _names(source, errors)
        assert errors.count(ErrorKind.JSX_PARSE) == 1

    def test_clean_file_records_no_errors(self):
        errors = ErrorLog()
        _names(_component('<div className="a" />'), errors)
        assert not errors
