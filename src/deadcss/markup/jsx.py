"""JSX dialect: identifiers used by ``className`` / ``id`` attributes.

Attribute values are classified by shape, never evaluated:

    className="a b"                     -> a, b
    className={`btn ${size}`}           -> btn
    className={styles.active}           -> active
    className={clsx('a', on && 'b')}    -> a, b
    className={['x', 'y']}              -> x, y
    className={{'z': on}}               -> z
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from deadcss.errors import MarkupParseError
from deadcss.markup.base import static_tokens
from deadcss.markup.syntax import (
    TSX,
    node_text,
    parse_source,
    significant_children,
    string_value,
    template_fragments,
    walk,
)
from deadcss.model.report import ErrorKind, ErrorLog, SourceKind
from deadcss.model.selector import UsedIdentifier

logger = logging.getLogger(__name__)

CLASS_ATTRIBUTES = frozenset({"className", "id"})

_LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})


def class_names(node: Node) -> list[str]:
    """Names a className expression may produce, by expression shape."""
    kind = node.type

    if kind == "string":
        return static_tokens(string_value(node))

    if kind == "template_string":
        names: list[str] = []
        for fragment in template_fragments(node):
            names.extend(static_tokens(fragment))
        return names

    if kind == "member_expression":
        # CSS modules: the property name is the class name.
        prop = node.child_by_field_name("property")
        if prop is not None and prop.type in ("property_identifier", "private_property_identifier"):
            return [node_text(prop).lstrip("#")]
        return []

    if kind == "subscript_expression":
        index = node.child_by_field_name("index")
        if index is not None and index.type == "string":
            value = string_value(index)
            return [value] if value else []
        return []

    if kind == "call_expression":
        args = node.child_by_field_name("arguments")
        if args is None:
            return []
        if args.type == "template_string":
            return class_names(args)
        return [name for arg in significant_children(args) for name in class_names(arg)]

    if kind == "array":
        return [name for element in significant_children(node) for name in class_names(element)]

    if kind == "object":
        names = []
        for prop in significant_children(node):
            if prop.type != "pair":
                continue
            key = prop.child_by_field_name("key")
            if key is not None and key.type == "string":
                names.extend(static_tokens(string_value(key)))
        return names

    if kind == "parenthesized_expression":
        return [name for inner in significant_children(node) for name in class_names(inner)]

    if kind == "binary_expression":
        operator = node.child_by_field_name("operator")
        if operator is None or operator.type not in _LOGICAL_OPERATORS:
            return []
        names = []
        for field in ("left", "right"):
            operand = node.child_by_field_name(field)
            if operand is not None:
                names.extend(class_names(operand))
        return names

    if kind == "ternary_expression":
        names = []
        for field in ("consequence", "alternative"):
            branch = node.child_by_field_name(field)
            if branch is not None:
                names.extend(class_names(branch))
        return names

    return []


def _attribute_names(attribute: Node) -> list[str]:
    children = significant_children(attribute)
    if not children or node_text(children[0]) not in CLASS_ATTRIBUTES:
        return []
    if len(children) < 2:
        return []
    value = children[1]
    if value.type == "string":
        return static_tokens(string_value(value))
    if value.type == "jsx_expression":
        inner = significant_children(value)
        return class_names(inner[0]) if inner else []
    return []


class JsxUsageExtractor:
    """Usage extractor for ``.jsx`` / ``.tsx`` / ``.js`` components."""

    kind = SourceKind.JSX

    def extract(self, source: str, file: str, errors: ErrorLog) -> list[UsedIdentifier]:
        if not source.strip():
            return []

        tree = parse_source(source, TSX)
        if tree is None:
            raise MarkupParseError("Failed to parse React component", file=file)

        root = tree.root_node
        if root.has_error:
            # Keep what the recovered tree yields; the rest of the file still counts.
            logger.warning("Syntax errors in %s; using partial parse", file)
            errors.add(
                ErrorKind.JSX_PARSE,
                "Syntax error in React component; results may be partial",
                file=file,
            )

        used: list[UsedIdentifier] = []
        for attribute in walk(root, frozenset({"jsx_attribute"})):
            for name in _attribute_names(attribute):
                used.append(UsedIdentifier(name=name, file=file))

        logger.debug("Found %d used identifiers in %s", len(used), file)
        return used
