"""deadcss model layer -- public type re-exports."""

from deadcss.model.diagnostic import Diagnostic, Position, Range, Severity
from deadcss.model.report import (
    AnalysisError,
    ErrorKind,
    ErrorLog,
    FileTally,
    ScanCounts,
    SourceKind,
)
from deadcss.model.selector import (
    Component,
    Selector,
    SelectorKind,
    UsedIdentifier,
    is_identifier,
)

__all__ = [
    # selector
    "SelectorKind",
    "Selector",
    "UsedIdentifier",
    "Component",
    "is_identifier",
    # diagnostic
    "Severity",
    "Position",
    "Range",
    "Diagnostic",
    # report
    "ErrorKind",
    "SourceKind",
    "AnalysisError",
    "ErrorLog",
    "FileTally",
    "ScanCounts",
]
