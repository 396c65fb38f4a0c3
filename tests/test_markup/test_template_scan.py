"""Tests for the component template pattern scan."""

from deadcss.markup.template import scan_template, template_usage
from deadcss.model.selector import UsedIdentifier


class TestScanTemplate:
    def test_static_class_attribute(self):
        assert scan_template('<div class="a b"></div>') == ["a", "b"]

    def test_single_quoted_class_attribute(self):
        assert scan_template("<div class='solo'></div>") == ["solo"]

    def test_ng_class_string_literal(self):
        assert scan_template("""<div [ngClass]="'x y'"></div>""") == ["x", "y"]

    def test_ng_class_bare_names(self):
        assert scan_template('<div [ngClass]="active highlight"></div>') == ["active", "highlight"]

    def test_ng_class_expression_with_quotes_is_ignored(self):
        assert scan_template("""<div [ngClass]="on ? 'a' : 'b'"></div>""") == []

    def test_ng_class_object_is_ignored(self):
        assert scan_template("""<div [ngClass]="{'x': on}"></div>""") == []

    def test_class_binding_string_literal(self):
        assert scan_template("""<div [class]="'p'"></div>""") == ["p"]

    def test_id_takes_first_token(self):
        assert scan_template('<section id="main other"></section>') == ["main"]

    def test_bare_interpolation(self):
        assert scan_template("<p>{{title}}</p>") == ["title"]

    def test_interpolation_with_spaces(self):
        assert scan_template("<p>{{ subtitle }}</p>") == ["subtitle"]

    def test_expression_interpolation_is_ignored(self):
        assert scan_template("<p>{{ user.name }} {{ a + b }}</p>") == []

    def test_single_class_binding(self):
        assert scan_template('<li [class.active]="isActive"></li>') == ["active"]

    def test_invalid_tokens_are_dropped(self):
        assert scan_template('<div class="ok w-1/2 a.b"></div>') == ["ok"]

    def test_patterns_combined(self):
        template = (
            '<div class="shell" id="app">\n'
            '  <nav [class.open]="menuOpen">{{ brand }}</nav>\n'
            "</div>"
        )
        assert sorted(scan_template(template)) == ["app", "brand", "open", "shell"]

    def test_empty_template(self):
        assert scan_template("") == []


class TestTemplateUsage:
    def test_attributes_file(self):
        assert template_usage('<b class="x"></b>', "a.html") == [UsedIdentifier(name="x", file="a.html")]
