"""Source formatter adapters."""

from __future__ import annotations

import subprocess
from typing import Protocol

from .errors import FormatError


class Formatter(Protocol):
    """Contract for synchronous, idempotent source formatters."""

    def format(self, source: str) -> str:
        """Return formatted ``source``."""


class PassthroughFormatter:
    """Returns generated source untouched."""

    def format(self, source: str) -> str:
        return source


class PrettierFormatter:
    """Formats component source with the prettier CLI."""

    def __init__(self, *, parser: str = "babel", executable: str | None = None) -> None:
        self.parser = parser
        self.executable = executable or "prettier"

    @classmethod
    def for_language(cls, *, typescript: bool, executable: str | None = None) -> "PrettierFormatter":
        return cls(parser="typescript" if typescript else "babel", executable=executable)

    def format(self, source: str) -> str:
        args = [self.executable, "--parser", self.parser, "--single-quote"]
        try:
            completed = subprocess.run(
                args,
                input=source,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise FormatError(
                f"Unable to locate prettier executable '{self.executable}'. Disable formatting or install prettier."
            ) from exc
        except subprocess.CalledProcessError as exc:
            message = exc.stderr.strip() or exc.stdout.strip() or str(exc.returncode)
            raise FormatError(f"prettier rejected generated source: {message}") from exc
        return completed.stdout


__all__ = ["Formatter", "PassthroughFormatter", "PrettierFormatter"]
