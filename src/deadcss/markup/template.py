"""Pattern scan of component templates for class and id usage.

Templates mix host markup with a binding syntax, so this is deliberately a
set of targeted patterns rather than a template parser:

    class="a b"             static classes
    [ngClass]="'a b'"       class-list binding with a literal string
    [ngClass]="a b"         same, bare names without quotes
    [class]="'a b'"         same, with the plain class binding
    id="x"                  static id
    {{ name }}              interpolation of a bare identifier
    [class.name]="expr"     single-class conditional binding
"""

from __future__ import annotations

import re

from deadcss.markup.base import static_tokens
from deadcss.model.selector import UsedIdentifier

_CLASS_ATTR_RE = re.compile(r"""\bclass\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_CLASS_LIST_BINDING_RE = re.compile(r"""\[(?:ngClass|class)\]\s*=\s*(["'])(.*?)\1""", re.DOTALL)
_ID_ATTR_RE = re.compile(r"""\bid\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_INTERPOLATION_RE = re.compile(r"\{\{\s*([^}]+?)\s*\}\}")
_CLASS_BINDING_RE = re.compile(r"\[class\.([a-zA-Z0-9_-]+)\]")

_BARE_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*$")
_STRING_LITERAL_RE = re.compile(r"""^\s*(["'])([^"']*)\1\s*$""")


def scan_template(template: str) -> list[str]:
    """Return every class/id name *template* uses, in pattern order."""
    names: list[str] = []

    for match in _CLASS_ATTR_RE.finditer(template):
        names.extend(static_tokens(match.group(2)))

    for match in _CLASS_LIST_BINDING_RE.finditer(template):
        value = match.group(2)
        literal = _STRING_LITERAL_RE.match(value)
        if literal:
            names.extend(static_tokens(literal.group(2)))
        elif "'" not in value and '"' not in value:
            names.extend(static_tokens(value))

    for match in _ID_ATTR_RE.finditer(template):
        names.extend(static_tokens(match.group(2))[:1])

    for match in _INTERPOLATION_RE.finditer(template):
        expression = match.group(1).strip()
        if _BARE_IDENTIFIER_RE.match(expression):
            names.append(expression)

    for match in _CLASS_BINDING_RE.finditer(template):
        names.append(match.group(1))

    return names


def template_usage(template: str, file: str) -> list[UsedIdentifier]:
    return [UsedIdentifier(name=name, file=file) for name in scan_template(template)]
