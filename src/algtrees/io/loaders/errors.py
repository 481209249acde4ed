from __future__ import annotations

"""Errors raised while loading expression and tree documents."""

from typing import List

from pydantic import ValidationError

ENTRY_SECTIONS = ("expressions", "trees")
MAX_REPORTED_ERRORS = 3


class LoaderError(RuntimeError):
    """A document could not be read or validated.

    ``entries`` names the document entries that failed validation, in the
    order pydantic reported them, so callers can point at the broken value
    rather than the whole file.
    """

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        self.entries = failed_entries(cause) if isinstance(cause, ValidationError) else []
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"{self.message} ({self.file_path})"
        if self.entries:
            text += f" in entr{'y' if len(self.entries) == 1 else 'ies'} {', '.join(self.entries)}"
        if isinstance(self.cause, ValidationError):
            return f"{text}: {summarize(self.cause)}"
        if self.cause:
            return f"{text}: {self.cause}"
        return text


def failed_entries(error: ValidationError) -> List[str]:
    """Entry names located by ``(section, name, ...)`` error paths."""
    names: List[str] = []
    for err in error.errors():
        loc = err.get("loc", ())
        if len(loc) >= 2 and loc[0] in ENTRY_SECTIONS and str(loc[1]) not in names:
            names.append(str(loc[1]))
    return names


def summarize(error: ValidationError) -> str:
    """One line per error, capped at MAX_REPORTED_ERRORS."""
    errors = error.errors()
    lines = [
        f"{'.'.join(str(part) for part in err.get('loc', ())) or '<root>'}: {err.get('msg', 'invalid')}"
        for err in errors[:MAX_REPORTED_ERRORS]
    ]
    if len(errors) > MAX_REPORTED_ERRORS:
        lines.append(f"... ({len(errors) - MAX_REPORTED_ERRORS} more)")
    return "; ".join(lines)
