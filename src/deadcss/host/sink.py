"""Diagnostics sink: where projected findings are handed to the host."""

from __future__ import annotations

from typing import Protocol

from deadcss.model.diagnostic import Diagnostic


class DiagnosticsSink(Protocol):
    """Per-file, replaceable diagnostic lists."""

    def clear(self) -> None: ...

    def set(self, file: str, diagnostics: list[Diagnostic]) -> None: ...


class MemoryDiagnosticsSink:
    """In-memory sink; ``set`` replaces whatever a file had before."""

    def __init__(self) -> None:
        self._by_file: dict[str, list[Diagnostic]] = {}

    def clear(self) -> None:
        self._by_file.clear()

    def set(self, file: str, diagnostics: list[Diagnostic]) -> None:
        if diagnostics:
            self._by_file[file] = list(diagnostics)
        else:
            self._by_file.pop(file, None)

    def get(self, file: str) -> list[Diagnostic]:
        return list(self._by_file.get(file, []))

    @property
    def files(self) -> list[str]:
        return list(self._by_file)

    def all(self) -> list[Diagnostic]:
        return [d for diags in self._by_file.values() for d in diags]

    def __len__(self) -> int:
        return sum(len(d) for d in self._by_file.values())
