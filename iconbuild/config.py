"""Configuration loading for iconbuild (.iconbuild.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".iconbuild.yml"
DEFAULT_PATTERN = "**/*.svg"
DEFAULT_CONCURRENCY = 8
NAMING_STYLES = ("preserve", "pascal")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class OptimizerConfig:
    """svgo invocation settings."""

    executable: str = "svgo"
    plugins: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FormatterConfig:
    """prettier invocation settings."""

    enabled: bool = True
    executable: str = "prettier"


@dataclass(frozen=True)
class BuildConfig:
    """Settings for a single build invocation."""

    input_dir: Path
    output_dir: Path
    typescript: bool = False
    pattern: str = DEFAULT_PATTERN
    naming: str = "preserve"
    concurrency: int = DEFAULT_CONCURRENCY
    static_dir: Optional[Path] = None
    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_dir", Path(self.input_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        if self.static_dir is not None:
            object.__setattr__(self, "static_dir", Path(self.static_dir))
        if self.naming not in NAMING_STYLES:
            raise ConfigError(
                f"Unknown naming style '{self.naming}' (expected one of {', '.join(NAMING_STYLES)})"
            )
        if self.concurrency < 1:
            raise ConfigError("concurrency must be at least 1")

    @property
    def components_dir(self) -> Path:
        return self.output_dir / "components"

    def with_overrides(self, **overrides: Any) -> "BuildConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def load_config(
    config_path: Path,
    *,
    input_dir: Path | str | None = None,
    output_dir: Path | str | None = None,
) -> BuildConfig:
    """Load build settings from disk, falling back to defaults when no file exists.

    Explicit ``input_dir`` and ``output_dir`` arguments take precedence over
    the file; a config that ends up without either is rejected.
    """
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    resolved_input = _optional_path(input_dir) or _as_path(data.get("input_dir"), root)
    resolved_output = _optional_path(output_dir) or _as_path(data.get("output_dir"), root)
    if resolved_input is None or resolved_output is None:
        raise ConfigError("Both input_dir and output_dir must be configured")

    optimizer_data = _as_dict(data.get("optimizer"))
    optimizer = OptimizerConfig(
        executable=_as_str(optimizer_data.get("executable")) or "svgo",
        plugins=_as_str_list(optimizer_data.get("plugins")),
    )

    formatter_data = _as_dict(data.get("formatter"))
    enabled = _as_bool(formatter_data.get("enabled"))
    formatter = FormatterConfig(
        enabled=True if enabled is None else enabled,
        executable=_as_str(formatter_data.get("executable")) or "prettier",
    )

    concurrency = data.get("concurrency", DEFAULT_CONCURRENCY)
    if not isinstance(concurrency, int) or isinstance(concurrency, bool):
        raise ConfigError("concurrency must be an integer")

    return BuildConfig(
        input_dir=resolved_input,
        output_dir=resolved_output,
        typescript=bool(_as_bool(data.get("typescript"))),
        pattern=_as_str(data.get("pattern")) or DEFAULT_PATTERN,
        naming=_as_str(data.get("naming")) or "preserve",
        concurrency=concurrency,
        static_dir=_as_path(data.get("static_dir"), root),
        optimizer=optimizer,
        formatter=formatter,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _optional_path(value: Path | str | None) -> Optional[Path]:
    return Path(value) if value is not None else None


def _as_path(value: Any, root: Path) -> Optional[Path]:
    if not isinstance(value, str) or not value.strip():
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
