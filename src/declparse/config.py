"""TOML config loading for declparse.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "declparse.toml"


@dataclass
class RenderConfig:
    color: bool = True


@dataclass
class ParseConfig:
    strict: bool = False


@dataclass
class DeclparseConfig:
    render: RenderConfig = field(default_factory=RenderConfig)
    parse: ParseConfig = field(default_factory=ParseConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find declparse.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> DeclparseConfig:
    """Parse a declparse.toml file into a DeclparseConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = DeclparseConfig()

    if "render" in data:
        rnd = data["render"]
        config.render = RenderConfig(
            color=rnd.get("color", True),
        )

    if "parse" in data:
        prs = data["parse"]
        config.parse = ParseConfig(
            strict=prs.get("strict", False),
        )

    return config


def resolve_config(start_path: Path | None = None) -> DeclparseConfig:
    """Load the nearest declparse.toml, or defaults when there is none."""
    try:
        return load_config(find_config(start_path))
    except FileNotFoundError:
        return DeclparseConfig()
