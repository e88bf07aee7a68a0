from __future__ import annotations

import dataclasses
import json
import re
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILENAME = ".stylesweep.json"


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or malformed."""


@dataclass(frozen=True)
class ScanConfig:
    holder: str = "StyleSheet"  # object whose .create() declares styles
    method: str = "create"
    identifier: str = "styles"  # canonical name the block is bound to
    extensions: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")
    ignore_patterns: tuple[str, ...] = ("node_modules", r"\.test\.")
    encoding: str = "utf-8"
    settle_delay: float = 0.3  # seconds to wait after a change in watch mode
    poll_interval: float = 1.0

    def should_ignore(self, path: str | Path) -> bool:
        text = str(path)
        return any(re.search(pattern, text) for pattern in self.ignore_patterns)

    def accepts(self, path: str | Path) -> bool:
        return Path(path).suffix in self.extensions

    def replace(self, **changes: object) -> ScanConfig:
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


_FIELDS = {f.name: f for f in dataclasses.fields(ScanConfig)}


def config_from_dict(data: dict[str, object]) -> ScanConfig:
    """Build a ScanConfig from a parsed JSON object."""
    unknown = sorted(set(data) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")
    kwargs: dict[str, object] = {}
    for key, value in data.items():
        default = _FIELDS[key].default
        if isinstance(default, tuple):
            if isinstance(value, str):
                value = (value,)
            if not isinstance(value, (list, tuple)):
                raise ConfigError(f"{key} must be a list of strings")
            value = tuple(str(v) for v in value)
        elif isinstance(default, float):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{key} must be a number")
            value = float(value)
        elif not isinstance(value, str):
            raise ConfigError(f"{key} must be a string")
        kwargs[key] = value
    for pattern in kwargs.get("ignore_patterns", ()):  # type: ignore[union-attr]
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigError(f"Invalid ignore pattern {pattern!r}: {e}") from e
    return ScanConfig(**kwargs)  # type: ignore[arg-type]


def load_config(path: str | Path) -> ScanConfig:
    """Load a ScanConfig from a JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return config_from_dict(data)


def find_config(start: str | Path) -> Path | None:
    """Return the nearest .stylesweep.json in *start* or its parents."""
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
