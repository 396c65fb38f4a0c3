"""Decorator dialect: ``@Component({...})`` classes and their templates.

Extraction runs in three stages:

1. Parse the module and collect a :class:`Component` for every class
   decorated with a ``Component(...)`` call whose first argument is an object
   literal carrying ``template`` or ``templateUrl``.
2. Obtain template text, inline or read from the referenced file.
3. Pattern-scan the text (see :mod:`deadcss.markup.template`).
"""

from __future__ import annotations

import logging
import os
import re

from tree_sitter import Node

from deadcss.errors import FileAccessError, TemplateParseError
from deadcss.host.files import FileReader
from deadcss.markup.syntax import (
    TYPESCRIPT,
    has_substitutions,
    node_text,
    parse_source,
    significant_children,
    string_value,
    template_fragments,
    walk,
)
from deadcss.markup.template import template_usage
from deadcss.model.report import ErrorKind, ErrorLog, SourceKind
from deadcss.model.selector import Component, UsedIdentifier

logger = logging.getLogger(__name__)

DECORATOR_NAME = "Component"

DEFAULT_MAX_TEMPLATE_BYTES = 2 * 1024 * 1024

_CLASS_NODES = frozenset({"class_declaration", "abstract_class_declaration", "class"})

_MODULE_MARKERS = (
    re.compile(r"@Component\s*\("),
    re.compile(r"""from\s+['"]@angular"""),
    re.compile(r"templateUrl\s*:"),
    re.compile(r"template\s*:"),
    re.compile(r"styleUrls?\s*:"),
)


def looks_like_component_module(source: str) -> bool:
    return any(p.search(source) for p in _MODULE_MARKERS)


def resolve_template_path(base_dir: str, reference: str) -> str:
    """Resolve a template *reference* against the component directory *base_dir*."""
    return os.path.normpath(os.path.join(base_dir, reference))


def _literal_text(node: Node) -> str | None:
    if node.type == "string":
        return string_value(node)
    if node.type == "template_string":
        if has_substitutions(node):
            logger.debug("Template literal with substitutions; using static text only")
        return " ".join(template_fragments(node))
    return None


def _property_key(pair: Node) -> str | None:
    key = pair.child_by_field_name("key")
    if key is None:
        return None
    if key.type == "property_identifier":
        return node_text(key)
    if key.type == "string":
        return string_value(key)
    return None


def _component_from_object(obj: Node, file: str) -> Component:
    component = Component(file=file)
    for pair in significant_children(obj):
        if pair.type != "pair":
            continue
        key = _property_key(pair)
        value = pair.child_by_field_name("value")
        if key is None or value is None:
            continue
        if key == "template":
            component.template = _literal_text(value)
        elif key == "templateUrl" and value.type == "string":
            component.template_url = string_value(value)
        elif key == "styleUrls" and value.type == "array":
            component.style_urls = [
                string_value(item) for item in significant_children(value) if item.type == "string"
            ]
        elif key == "styleUrl" and value.type == "string":
            component.style_urls = [string_value(value)]
    return component


def _decorators(class_node: Node) -> list[Node]:
    decorators = [c for c in class_node.children if c.type == "decorator"]
    parent = class_node.parent
    if parent is not None and parent.type == "export_statement":
        decorators.extend(c for c in parent.children if c.type == "decorator")
    return decorators


def _component_argument(decorator: Node) -> Node | None:
    """The object literal passed to ``@Component(...)``, if that is what this is."""
    inner = significant_children(decorator)
    if not inner or inner[0].type != "call_expression":
        return None
    call = inner[0]
    function = call.child_by_field_name("function")
    if function is None or function.type != "identifier" or node_text(function) != DECORATOR_NAME:
        return None
    args = call.child_by_field_name("arguments")
    if args is None:
        return None
    positional = significant_children(args)
    if not positional or positional[0].type != "object":
        return None
    return positional[0]


def find_components(source: str, file: str) -> list[Component]:
    """Stage 1: every decorated component class in *source* with a template."""
    tree = parse_source(source, TYPESCRIPT)
    if tree is None:
        raise TemplateParseError("Failed to parse Angular component", file=file)
    if tree.root_node.has_error:
        logger.debug("Syntax errors in %s; decorators may be missed", file)

    components: list[Component] = []
    for class_node in walk(tree.root_node, _CLASS_NODES):
        for decorator in _decorators(class_node):
            obj = _component_argument(decorator)
            if obj is None:
                continue
            component = _component_from_object(obj, file)
            if component.has_template:
                components.append(component)
    return components


class DecoratorUsageExtractor:
    """Usage extractor for decorator-based (``.ts``) components."""

    kind = SourceKind.DECORATOR

    def __init__(self, reader: FileReader, max_template_bytes: int = DEFAULT_MAX_TEMPLATE_BYTES) -> None:
        self.reader = reader
        self.max_template_bytes = max_template_bytes

    def extract(self, source: str, file: str, errors: ErrorLog) -> list[UsedIdentifier]:
        if not source.strip():
            return []
        if not looks_like_component_module(source):
            logger.debug("Skipping %s: not a decorated component module", os.path.basename(file))
            return []

        components = find_components(source, file)
        logger.debug("Found %d @%s decorators in %s", len(components), DECORATOR_NAME, file)

        used: list[UsedIdentifier] = []
        for component in components:
            if component.template is not None:
                used.extend(template_usage(component.template, file))
            elif component.template_url is not None:
                used.extend(
                    self._external_template_usage(component.file, component.template_url, errors)
                )
        return used

    def _external_template_usage(
        self, component_file: str, template_url: str, errors: ErrorLog
    ) -> list[UsedIdentifier]:
        path = resolve_template_path(os.path.dirname(component_file), template_url)
        try:
            text = self.reader.read(path, self.max_template_bytes)
        except FileAccessError as exc:
            logger.warning("Template %s for %s: %s", template_url, component_file, exc)
            errors.add(
                ErrorKind.FILE_ACCESS,
                f"Template file not accessible: {template_url}",
                file=path,
                details=f"Referenced from {os.path.basename(component_file)} ({exc.reason.value})",
            )
            return []
        return template_usage(text, path)
