"""Configuration dataclasses and YAML loader for Martian Robots."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ExportConfig:
    csv: bool = False
    snapshot: bool = False
    gif: bool = False
    gif_fps: int = 2
    report: bool = False


@dataclass
class LoggingConfig:
    level: str = 'WARNING'

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


@dataclass
class SimulationConfig:
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Can be overridden by CLI
    input_path: Optional[Path] = None
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def default_config() -> SimulationConfig:
    """Configuration used when no YAML file is given."""
    return SimulationConfig()


def _parse_export(export_raw: Dict[str, Any]) -> ExportConfig:
    """Parse export toggles from raw YAML data."""
    fps = export_raw.get('gif_fps', 2)
    if fps <= 0:
        raise ValueError(f"gif_fps must be positive, got {fps}")
    return ExportConfig(
        csv=export_raw.get('csv', False),
        snapshot=export_raw.get('snapshot', False),
        gif=export_raw.get('gif', False),
        gif_fps=fps,
        report=export_raw.get('report', False)
    )


def _parse_logging(logging_raw: Dict[str, Any]) -> LoggingConfig:
    """Parse logging section from raw YAML data."""
    level = str(logging_raw.get('level', 'WARNING')).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    return LoggingConfig(level=level)


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    input_raw = raw.get('input')
    out_dir_raw = raw.get('out_dir')

    return SimulationConfig(
        export=_parse_export(raw.get('export') or {}),
        logging=_parse_logging(raw.get('logging') or {}),
        input_path=Path(input_raw) if input_raw else None,
        quiet=raw.get('quiet', False),
        out_dir=Path(out_dir_raw) if out_dir_raw else Path("./output")
    )
