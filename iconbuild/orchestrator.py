"""Pipeline orchestration for icon builds."""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

from .config import BuildConfig
from .errors import (
    DiscoveryError,
    DuplicateIconError,
    FormatError,
    OptimizeError,
    ParseError,
    ReadError,
    WriteError,
)
from .filesystem import FileSystem, LocalFileSystem
from .formatter import Formatter, PassthroughFormatter, PrettierFormatter
from .logging import get_logger
from .models import IconSource, IndexModule
from .optimizer import Optimizer, SvgoOptimizer
from .renderer import ComponentRenderer

DEFAULT_STATIC_DIR = Path(__file__).with_name("templates") / "static"

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
# Names that match the pattern but cannot be bound with ``const``.
_RESERVED_WORDS = frozenset(
    """
    arguments await break case catch class const continue debugger default delete do
    else enum eval export extends false finally for function if implements import in
    instanceof interface let new null package private protected public return static
    super switch this throw true try typeof var void while with yield
    """.split()
)
_WORD_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


@dataclass
class BuildResult:
    """Files written by a completed build."""

    components: List[Path] = field(default_factory=list)
    index_path: Path | None = None

    @property
    def icon_count(self) -> int:
        return len(self.components)


def component_identifier(path: Path, naming: str = "preserve") -> str:
    """Derive the exported component name for an icon file."""
    stem = path.stem
    if naming == "pascal":
        words = [word for word in _WORD_SEPARATORS.split(stem) if word]
        stem = "".join(word[:1].upper() + word[1:] for word in words)
    return stem


class Orchestrator:
    """Drives discovered icons through optimize, render, format and write."""

    def __init__(
        self,
        optimizer: Optimizer | None = None,
        formatter: Formatter | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.optimizer = optimizer
        self.formatter = formatter
        self.filesystem = filesystem or LocalFileSystem()
        self.logger = get_logger("orchestrator")

    async def build(self, config: BuildConfig) -> BuildResult:
        """Regenerate ``config.output_dir`` from the icons under ``config.input_dir``."""
        self.logger.info(
            "Building icons from %s into %s%s",
            config.input_dir,
            config.output_dir,
            " (typescript)" if config.typescript else "",
        )
        owned_optimizer = None if self.optimizer else self._default_optimizer(config)
        optimizer = self.optimizer or owned_optimizer
        formatter = self.formatter or self._default_formatter(config)
        renderer = ComponentRenderer(typescript=config.typescript)

        self._prepare_output(config)
        paths = self._discover(config)
        sources = [self._read_source(path, config) for path in paths]
        self.logger.debug("Discovered %d icons", len(sources))

        try:
            optimized = await self._optimize_all(optimizer, sources, config.concurrency)
        finally:
            if owned_optimizer is not None:
                owned_optimizer.close()

        result = BuildResult()
        for source, markup in zip(sources, optimized):
            try:
                module = renderer.render_module(source.identifier, markup)
            except ParseError as exc:
                raise ParseError(f"{source.path}: {exc}", path=source.path) from exc
            try:
                formatted = formatter.format(module.source)
            except FormatError as exc:
                raise FormatError(f"{source.path}: {exc}", path=source.path) from exc
            target = config.components_dir / module.filename
            self._write(target, formatted)
            self.logger.debug("Wrote %s", target)
            result.components.append(target)

        index = IndexModule([source.identifier for source in sources], typescript=config.typescript)
        index_path = config.output_dir / index.filename
        self._write(index_path, index.render())
        result.index_path = index_path
        self.logger.info("Wrote %d icon components and %s", result.icon_count, index_path)
        return result

    @staticmethod
    def _default_optimizer(config: BuildConfig) -> SvgoOptimizer:
        return SvgoOptimizer(
            executable=config.optimizer.executable,
            plugins=config.optimizer.plugins,
        )

    @staticmethod
    def _default_formatter(config: BuildConfig) -> Formatter:
        if not config.formatter.enabled:
            return PassthroughFormatter()
        return PrettierFormatter.for_language(
            typescript=config.typescript,
            executable=config.formatter.executable,
        )

    def _prepare_output(self, config: BuildConfig) -> None:
        static_dir = config.static_dir or DEFAULT_STATIC_DIR
        try:
            self.filesystem.remove_tree(config.output_dir)
            self.filesystem.make_dirs(config.components_dir)
            self.filesystem.copy_static(static_dir, config.output_dir)
        except OSError as exc:
            raise WriteError(
                f"Unable to prepare output directory {config.output_dir}: {exc}",
                path=config.output_dir,
            ) from exc

    def _discover(self, config: BuildConfig) -> List[Path]:
        try:
            paths = list(self.filesystem.list_files(config.input_dir, config.pattern))
        except OSError as exc:
            raise DiscoveryError(
                f"Unable to enumerate icons in {config.input_dir}: {exc}",
                path=config.input_dir,
            ) from exc

        seen: Dict[str, Path] = {}
        for path in paths:
            identifier = component_identifier(path, config.naming)
            if not _IDENTIFIER_PATTERN.match(identifier) or identifier in _RESERVED_WORDS:
                raise DiscoveryError(
                    f"{path} does not map to a valid component name ('{identifier}')",
                    path=path,
                )
            if identifier in seen:
                raise DuplicateIconError(
                    f"{path} and {seen[identifier]} both map to component '{identifier}'",
                    path=path,
                )
            seen[identifier] = path
        return paths

    def _read_source(self, path: Path, config: BuildConfig) -> IconSource:
        try:
            markup = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Unable to read {path}: {exc}", path=path) from exc
        return IconSource(
            path=path,
            identifier=component_identifier(path, config.naming),
            markup=markup,
        )

    async def _optimize_all(
        self,
        optimizer: Optimizer,
        sources: Sequence[IconSource],
        concurrency: int,
    ) -> List[str]:
        semaphore = asyncio.Semaphore(concurrency)

        async def _optimize(source: IconSource) -> str:
            async with semaphore:
                try:
                    return await optimizer.optimize(source.markup)
                except OptimizeError as exc:
                    raise OptimizeError(f"{source.path}: {exc}", path=source.path) from exc

        # The first failure cancels every outstanding optimization before it propagates.
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(_optimize(source)) for source in sources]
        except ExceptionGroup as errors:
            raise errors.exceptions[0]
        # Results follow discovery order regardless of completion order.
        return [task.result() for task in tasks]

    def _write(self, path: Path, content: str) -> None:
        try:
            self.filesystem.write_text(path, content)
        except OSError as exc:
            raise WriteError(f"Unable to write {path}: {exc}", path=path) from exc


async def build_icons(
    input_dir: Path | str,
    output_dir: Path | str,
    typescript: bool = False,
    *,
    optimizer: Optimizer | None = None,
    formatter: Formatter | None = None,
    filesystem: FileSystem | None = None,
) -> BuildResult:
    """Build icon components from ``input_dir`` into ``output_dir``."""
    config = BuildConfig(input_dir=Path(input_dir), output_dir=Path(output_dir), typescript=typescript)
    orchestrator = Orchestrator(optimizer=optimizer, formatter=formatter, filesystem=filesystem)
    return await orchestrator.build(config)


__all__ = ["BuildResult", "Orchestrator", "build_icons", "component_identifier"]
