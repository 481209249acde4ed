from __future__ import annotations

"""Resolving document names given on the command line."""

from pathlib import Path

DOCUMENT_SUFFIX = ".yaml"


def data_dir() -> Path:
    return Path.cwd() / "data"


def find_document(name_or_path: str) -> str:
    """
    Find a document with smart resolution.

    1. If the path exists as given, use it
    2. If it exists with a .yaml extension added, use that
    3. Otherwise look in the data/ folder (adding .yaml if missing)

    Args:
        name_or_path: Either a path or a bare document name

    Returns:
        Resolved path to the document

    Raises:
        FileNotFoundError: If the document cannot be found
    """
    p = Path(name_or_path)
    if p.is_file():
        return str(p)

    if not name_or_path.endswith(DOCUMENT_SUFFIX):
        with_suffix = Path(f"{name_or_path}{DOCUMENT_SUFFIX}")
        if with_suffix.is_file():
            return str(with_suffix)

    base_name = p.name if p.name.endswith(DOCUMENT_SUFFIX) else f"{p.name}{DOCUMENT_SUFFIX}"
    candidate = data_dir() / base_name
    if candidate.is_file():
        return str(candidate)

    raise FileNotFoundError(f"Document not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {candidate}")


__all__ = ["data_dir", "find_document"]
