"""Filesystem collaborators: file discovery and size-bounded reads."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Iterable, Protocol

from deadcss.errors import FileAccessError, FileAccessReason


class FileReader(Protocol):
    """Turns a path into text, or raises :class:`FileAccessError`."""

    def read(self, path: str, max_bytes: int) -> str: ...


class LocalFileReader:
    """Reads UTF-8 text from the local filesystem."""

    def read(self, path: str, max_bytes: int) -> str:
        try:
            size = os.stat(path).st_size
        except FileNotFoundError as exc:
            raise FileAccessError(
                "File does not exist", reason=FileAccessReason.NOT_FOUND, file=path
            ) from exc
        except OSError as exc:
            raise FileAccessError(
                f"Cannot stat file: {exc}", reason=FileAccessReason.UNREADABLE, file=path
            ) from exc

        if size > max_bytes:
            raise FileAccessError(
                f"File too large ({size} bytes > {max_bytes}), skipping for performance",
                reason=FileAccessReason.TOO_LARGE,
                file=path,
            )

        try:
            return Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise FileAccessError(
                f"Cannot read file: {exc}", reason=FileAccessReason.UNREADABLE, file=path
            ) from exc


def _is_excluded(rel_path: str, patterns: Iterable[str]) -> bool:
    # "./" lets "**/dir/**" match entries directly under the root.
    candidate = "./" + rel_path
    return any(fnmatch.fnmatch(candidate, pat) or fnmatch.fnmatch(rel_path, pat) for pat in patterns)


def discover_files(
    root: str | os.PathLike[str],
    extensions: Iterable[str],
    exclude_patterns: Iterable[str] = (),
) -> list[str]:
    """Return sorted absolute paths under *root* with one of *extensions*.

    Exclusion globs are matched against the root-relative POSIX path;
    excluded directories are not descended into.
    """
    root_path = Path(root).resolve()
    wanted = {ext.lower() for ext in extensions}
    patterns = list(exclude_patterns)
    found: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root_path):
        rel_dir = Path(dirpath).relative_to(root_path).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"
        dirnames[:] = sorted(
            d for d in dirnames if not _is_excluded(prefix + d + "/", patterns)
        )
        for name in filenames:
            if os.path.splitext(name)[1].lower() not in wanted:
                continue
            rel = prefix + name
            if _is_excluded(rel, patterns):
                continue
            found.append(str(Path(dirpath, name)))

    return sorted(found)
