from __future__ import annotations

"""Shared loader error utilities."""

import os
from typing import Iterable, List

import yaml
from pydantic import ValidationError

INLINE_SOURCE = "<inline>"
MAX_REPORTED_ERRORS = 3


class LoaderError(RuntimeError):
    """Wraps ingestion failures with the source they came from.

    ``source`` is a file path, or ``<inline>`` when the graph was built from an
    in-memory mapping.
    """

    def __init__(self, source: str, message: str, *, cause: Exception | None = None):
        self.source = source
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    @property
    def file_path(self) -> str:
        return self.source

    def _build_message(self) -> str:
        base = f"{self.message} ({self._display_source(self.source)})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if isinstance(self.cause, yaml.MarkedYAMLError) and self.cause.problem_mark is not None:
            mark = self.cause.problem_mark
            return f"{base}: line {mark.line + 1}, column {mark.column + 1}: {self.cause.problem}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _display_source(source: str) -> str:
        if source == INLINE_SOURCE:
            return source
        try:
            return os.path.relpath(source)
        except ValueError:  # pragma: no cover - different drive on Windows
            return source

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets: List[str] = []
        for err in error_list[:MAX_REPORTED_ERRORS]:
            loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
            snippets.append(f"{loc}: {err.get('msg') or err.get('type') or 'validation error'}")
        remaining = len(error_list) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["INLINE_SOURCE", "LoaderError"]
