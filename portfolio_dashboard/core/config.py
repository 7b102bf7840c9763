"""Configuration loading and validation."""
import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from portfolio_dashboard.models import SheetLayout, WeightUnit
from portfolio_dashboard.sources.resolver import DEFAULT_MIN_LENGTH, DEFAULT_MIRRORS

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    pass


@dataclass
class SourceConfig:
    """Where the sheet is fetched from."""

    url: str
    mirrors: list[str] = field(default_factory=lambda: list(DEFAULT_MIRRORS))
    min_length: int = DEFAULT_MIN_LENGTH
    timeout_seconds: float = 15.0


@dataclass
class SheetConfig:
    """How the sheet is laid out."""

    layout: SheetLayout = SheetLayout.EXTENDED
    weight_unit: WeightUnit = WeightUnit.AUTO


@dataclass
class RefreshConfig:
    """Refresh scheduling (0 means refresh once)."""

    interval_seconds: float = 0.0


@dataclass
class DisplayConfig:
    """Text report settings."""

    top_allocations: int = 5


@dataclass
class Config:
    """Main configuration container."""

    source: SourceConfig
    sheet: SheetConfig = field(default_factory=SheetConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _parse_enum(enum_cls, value, setting: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigError(f"Invalid {setting}: {value!r} (expected one of: {choices})") from e


def _parse_number(value, setting: str, kind=float, minimum=0):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Invalid {setting}: {value!r} (expected a number)")
    if kind is int and not float(value).is_integer():
        raise ConfigError(f"Invalid {setting}: {value!r} (expected a whole number)")
    if value < minimum:
        raise ConfigError(f"Invalid {setting}: {value!r} (must be at least {minimum})")
    return kind(value)


def load_config(path: str) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Config object with validated configuration

    Raises:
        ConfigError: If file not found, invalid YAML, or missing required fields
    """
    config_path = Path(path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}") from e

    if raw is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(raw, dict):
        raise ConfigError("Configuration must be a mapping")

    if "source" not in raw:
        raise ConfigError("Missing required configuration section: source")

    # Parse source config
    src_raw = raw["source"] or {}
    if not src_raw.get("url"):
        raise ConfigError("Missing required setting: source.url")

    mirrors = src_raw.get("mirrors", DEFAULT_MIRRORS)
    if not mirrors:
        raise ConfigError("source.mirrors must list at least one template")

    source = SourceConfig(
        url=src_raw["url"],
        mirrors=list(mirrors),
        min_length=_parse_number(src_raw.get("min_length", DEFAULT_MIN_LENGTH), "source.min_length", int),
        timeout_seconds=_parse_number(src_raw.get("timeout_seconds", 15.0), "source.timeout_seconds"),
    )

    # Parse sheet config
    sheet_raw = raw.get("sheet") or {}
    sheet = SheetConfig(
        layout=_parse_enum(SheetLayout, sheet_raw.get("layout", "extended"), "sheet.layout"),
        weight_unit=_parse_enum(WeightUnit, sheet_raw.get("weight_unit", "auto"), "sheet.weight_unit"),
    )

    # Parse refresh and display config
    refresh_raw = raw.get("refresh") or {}
    refresh = RefreshConfig(
        interval_seconds=_parse_number(refresh_raw.get("interval_seconds", 0.0), "refresh.interval_seconds"),
    )

    display_raw = raw.get("display") or {}
    display = DisplayConfig(
        top_allocations=_parse_number(display_raw.get("top_allocations", 5), "display.top_allocations", int),
    )

    config = Config(
        source=source,
        sheet=sheet,
        refresh=refresh,
        display=display,
    )

    logger.info(f"Loaded configuration from {path}")
    logger.debug(f"Source: {source.url} via {len(source.mirrors)} candidates")
    logger.debug(f"Sheet: layout={sheet.layout.value}, weight_unit={sheet.weight_unit.value}")

    return config
