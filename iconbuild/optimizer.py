"""Markup optimizer adapters."""

from __future__ import annotations

import asyncio
import contextlib
import json
import tempfile
from pathlib import Path
from typing import List, Protocol, Sequence

from .errors import OptimizeError
from .logging import get_logger

# Plugins layered on top of svgo's preset-default.
DEFAULT_PLUGINS = ("removeStyleElement", "removeTitle")

# Keep the attributes the renderer reads from the root element.
_PRESET_OVERRIDES = {"removeViewBox": False}


class Optimizer(Protocol):
    """Contract for asynchronous markup optimizers."""

    async def optimize(self, markup: str) -> str:
        """Return optimized markup for ``markup``."""


class SvgoOptimizer:
    """Optimizes markup by piping it through the svgo CLI."""

    def __init__(
        self,
        *,
        executable: str | None = None,
        plugins: Sequence[str] | None = None,
    ) -> None:
        self.executable = executable or "svgo"
        self.plugins: List[str] = list(DEFAULT_PLUGINS)
        for plugin in plugins or ():
            if plugin not in self.plugins:
                self.plugins.append(plugin)
        self.logger = get_logger("optimizer")
        self._config_dir: tempfile.TemporaryDirectory[str] | None = None

    def config_source(self) -> str:
        """Return the svgo.config.js module text for the configured plugins."""
        plugins: List[object] = [
            {"name": "preset-default", "params": {"overrides": _PRESET_OVERRIDES}}
        ]
        plugins.extend(self.plugins)
        return "module.exports = " + json.dumps({"plugins": plugins}, indent=2) + ";\n"

    @property
    def config_path(self) -> Path:
        """svgo.config.js shared by every call on this instance, written on first use."""
        if self._config_dir is None:
            self._config_dir = tempfile.TemporaryDirectory(prefix="iconbuild-svgo-")
            path = Path(self._config_dir.name) / "svgo.config.js"
            path.write_text(self.config_source(), encoding="utf-8")
            self.logger.debug("Wrote svgo config to %s", path)
        return Path(self._config_dir.name) / "svgo.config.js"

    def close(self) -> None:
        """Remove the generated config directory."""
        if self._config_dir is not None:
            self._config_dir.cleanup()
            self._config_dir = None

    async def optimize(self, markup: str) -> str:
        args = [
            self.executable,
            "--input",
            "-",
            "--output",
            "-",
            "--config",
            str(self.config_path),
        ]
        self.logger.debug("Running %s", " ".join(args))
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise OptimizeError(
                f"Unable to locate svgo executable '{self.executable}'. Install it with `npm install -g svgo`."
            ) from exc
        try:
            stdout, stderr = await process.communicate(markup.encode("utf-8"))
        except asyncio.CancelledError:
            # Cancelling communicate() leaves the child running.
            if process.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                await process.wait()
            raise

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip() or str(process.returncode)
            raise OptimizeError(f"svgo failed: {message}")
        output = stdout.decode("utf-8").strip()
        if not output:
            raise OptimizeError("svgo returned no output")
        return output


__all__ = ["DEFAULT_PLUGINS", "Optimizer", "SvgoOptimizer"]
