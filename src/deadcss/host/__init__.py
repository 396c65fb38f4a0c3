from deadcss.host.files import FileReader, LocalFileReader, discover_files
from deadcss.host.sink import DiagnosticsSink, MemoryDiagnosticsSink

__all__ = [
    "FileReader",
    "LocalFileReader",
    "discover_files",
    "DiagnosticsSink",
    "MemoryDiagnosticsSink",
]
