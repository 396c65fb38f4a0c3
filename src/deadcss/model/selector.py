"""Identifier model: declared selectors, used identifiers, decorated components."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

# Bare class/id name as both stylesheets and markup must agree on it.
IDENTIFIER_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


def is_identifier(name: str) -> bool:
    return bool(IDENTIFIER_RE.match(name))


class SelectorKind(Enum):
    """Namespace a selector was declared in."""

    CLASS = "class"
    ID = "id"

    @property
    def prefix(self) -> str:
        return "." if self is SelectorKind.CLASS else "#"

    @property
    def label(self) -> str:
        return "class" if self is SelectorKind.CLASS else "ID"


@dataclass(frozen=True)
class Selector:
    """A class or id selector declared in a stylesheet rule.

    Attributes:
        kind: Class or id.
        name: Bare name without the ``.``/``#`` prefix.
        file: Path of the stylesheet that declares it.
        line: 1-based line of the declaring rule.
        column: 1-based column of the declaring rule.
    """

    kind: SelectorKind
    name: str
    file: str
    line: int
    column: int

    @property
    def text(self) -> str:
        return f"{self.kind.prefix}{self.name}"

    def __str__(self) -> str:
        return f"{self.text} ({self.file}:{self.line}:{self.column})"


@dataclass(frozen=True)
class UsedIdentifier:
    """A bare class/id name observed in component markup."""

    name: str
    file: str


@dataclass
class Component:
    """A class decorated with ``@Component({...})``.

    Only lives between decorator extraction and template scanning.
    ``style_urls`` is informational: names are matched globally, not against
    the component's own stylesheets.
    """

    file: str
    template: str | None = None
    template_url: str | None = None
    style_urls: list[str] = field(default_factory=list)

    @property
    def has_template(self) -> bool:
        return self.template is not None or self.template_url is not None
