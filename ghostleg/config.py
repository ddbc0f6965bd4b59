"""Configuration parsing for ghostleg."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Use tomllib (Python 3.11+) with fallback to tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError as e:
        raise ImportError(
            "tomli is required for Python < 3.11. Install with: pip install tomli"
        ) from e


class InvalidConfiguration(ValueError):
    """Raised when a ladder cannot be built from the given parameters."""

    pass


@dataclass
class LadderConfig:
    """Ladder shape configuration."""

    column_count: int = 4
    exclude_self: bool = False
    labels: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate ladder configuration."""
        if self.column_count < 2:
            raise InvalidConfiguration(
                f"column_count must be at least 2, got {self.column_count}"
            )
        if self.labels and len(self.labels) != self.column_count:
            raise InvalidConfiguration(
                f"labels must name every column: got {len(self.labels)} labels "
                f"for {self.column_count} columns"
            )

    @property
    def effective_labels(self) -> list[str]:
        """Return labels or default column numbers if empty."""
        return self.labels or [str(i + 1) for i in range(self.column_count)]


@dataclass
class GeometryConfig:
    """Drawing geometry used when tracing paths."""

    cell_width: float = 60
    cell_height: float = 28
    start_y: float = 40
    x_offset: float = 50

    def __post_init__(self) -> None:
        """Validate geometry configuration."""
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise InvalidConfiguration(
                f"cell size must be positive, got "
                f"{self.cell_width}x{self.cell_height}"
            )


@dataclass
class PathsConfig:
    """File paths configuration."""

    output_dir: str = "./output"


@dataclass
class Config:
    """Main configuration container."""

    seed: int = 0
    ladder: LadderConfig = field(default_factory=LadderConfig)
    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create Config from a dictionary (e.g., parsed TOML)."""
        run_section = data.get("run", {})
        ladder_section = data.get("ladder", {})
        geometry_section = data.get("geometry", {})
        paths_section = data.get("paths", {})

        return cls(
            seed=run_section.get("seed", 0),
            ladder=LadderConfig(
                column_count=ladder_section.get("column_count", 4),
                exclude_self=ladder_section.get("exclude_self", False),
                labels=list(ladder_section.get("labels", [])),
            ),
            geometry=GeometryConfig(
                cell_width=geometry_section.get("cell_width", 60),
                cell_height=geometry_section.get("cell_height", 28),
                start_y=geometry_section.get("start_y", 40),
                x_offset=geometry_section.get("x_offset", 50),
            ),
            paths=PathsConfig(
                output_dir=paths_section.get("output_dir", "./output"),
            ),
        )

    @classmethod
    def from_toml(cls, path: str | Path) -> Config:
        """Load configuration from a TOML file."""
        path = Path(path)
        with path.open("rb") as f:
            data = tomllib.load(f)
        return cls.from_dict(data)


def load_config(path: str | Path) -> Config:
    """Load configuration from a TOML file.

    This is a convenience function that wraps Config.from_toml().

    Args:
        path: Path to the TOML configuration file.

    Returns:
        Parsed Config object.
    """
    return Config.from_toml(path)
