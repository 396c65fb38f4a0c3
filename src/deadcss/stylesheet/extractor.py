"""Selector extraction: stylesheet text to declared class/id selectors."""

from __future__ import annotations

import logging
import os
import re

from deadcss.errors import StylesheetParseError
from deadcss.model.report import ErrorKind, ErrorLog
from deadcss.model.selector import Selector, is_identifier
from deadcss.stylesheet.scanner import iter_rules
from deadcss.stylesheet.selectors import parse_selector, split_selector_list

logger = logging.getLogger(__name__)

# Extensions whose syntax allows ``//`` comments and ``#{}`` interpolation.
PREPROCESSOR_EXTENSIONS = frozenset({".scss", ".sass", ".less"})

# Cheap signals that text is a stylesheet at all.
_STYLESHEET_PATTERNS = (
    re.compile(r"\{[^}]*\}"),  # rule with braces
    re.compile(r"@[a-zA-Z-]+"),  # at-rule
    re.compile(r"[.#][a-zA-Z0-9_-]+"),  # class or id selector
    re.compile(r"[a-zA-Z-]+\s*:"),  # property declaration
)


def looks_like_stylesheet(source: str) -> bool:
    """Return True if *source* shows any sign of stylesheet syntax."""
    return any(p.search(source) for p in _STYLESHEET_PATTERNS)


def extract_selectors(
    source: str,
    file: str,
    errors: ErrorLog | None = None,
) -> list[Selector]:
    """Extract every class and id selector declared in *source*.

    One :class:`Selector` is produced per class/id token per rule, positioned
    at the rule's start. A selector that fails to parse is recorded in
    *errors* and skipped. Whole-file problems (text that is not a
    stylesheet, unbalanced braces) raise :class:`StylesheetParseError`.
    """
    if not source.strip():
        return []

    if not looks_like_stylesheet(source):
        raise StylesheetParseError(
            "File does not appear to contain valid CSS",
            file=file,
            details="File may be corrupted or in the wrong format",
        )

    preprocessor = os.path.splitext(file)[1].lower() in PREPROCESSOR_EXTENSIONS
    selectors: list[Selector] = []
    try:
        for rule in iter_rules(source, preprocessor=preprocessor):
            for text in split_selector_list(rule.prelude):
                try:
                    refs = parse_selector(text)
                except StylesheetParseError as exc:
                    logger.warning("Skipping selector %r in %s: %s", text, file, exc)
                    if errors is not None:
                        errors.add(
                            ErrorKind.STYLESHEET_PARSE,
                            f"Failed to parse selector: {text}",
                            file=file,
                            details=str(exc),
                        )
                    continue
                for kind, name in refs:
                    if not is_identifier(name):
                        logger.debug("Ignoring non-identifier %s name %r in %s", kind.value, name, file)
                        continue
                    selectors.append(
                        Selector(
                            kind=kind,
                            name=name,
                            file=file,
                            line=rule.line,
                            column=rule.column,
                        )
                    )
    except StylesheetParseError as exc:
        exc.file = file
        raise
    return selectors
