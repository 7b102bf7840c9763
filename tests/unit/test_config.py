"""Tests for configuration loading."""
import pytest
import tempfile


SAMPLE_CONFIG = """
source:
  url: "https://docs.example.com/sheet/pub?output=csv"
  mirrors:
    - "https://mirror.example.com/?u={url}"
    - "{raw}"
  min_length: 80
  timeout_seconds: 5

sheet:
  layout: "simple"
  weight_unit: "fraction"

refresh:
  interval_seconds: 300

display:
  top_allocations: 3
"""

MINIMAL_CONFIG = """
source:
  url: "https://docs.example.com/sheet/pub?output=csv"
"""


def _write(content: str) -> str:
    f = tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False)
    f.write(content)
    f.close()
    return f.name


def test_load_config_source():
    from portfolio_dashboard.core.config import load_config

    config = load_config(_write(SAMPLE_CONFIG))

    assert config.source.url == "https://docs.example.com/sheet/pub?output=csv"
    assert config.source.mirrors == ["https://mirror.example.com/?u={url}", "{raw}"]
    assert config.source.min_length == 80
    assert config.source.timeout_seconds == 5


def test_load_config_sheet_and_display():
    from portfolio_dashboard.core.config import load_config
    from portfolio_dashboard.models import SheetLayout, WeightUnit

    config = load_config(_write(SAMPLE_CONFIG))

    assert config.sheet.layout is SheetLayout.SIMPLE
    assert config.sheet.weight_unit is WeightUnit.FRACTION
    assert config.refresh.interval_seconds == 300
    assert config.display.top_allocations == 3


def test_minimal_config_defaults():
    from portfolio_dashboard.core.config import load_config
    from portfolio_dashboard.models import SheetLayout, WeightUnit
    from portfolio_dashboard.sources.resolver import DEFAULT_MIRRORS

    config = load_config(_write(MINIMAL_CONFIG))

    assert config.source.mirrors == DEFAULT_MIRRORS
    assert config.source.min_length == 50
    assert config.sheet.layout is SheetLayout.EXTENDED
    assert config.sheet.weight_unit is WeightUnit.AUTO
    assert config.refresh.interval_seconds == 0
    assert config.display.top_allocations == 5


def test_default_config_file_loads():
    from pathlib import Path
    from portfolio_dashboard.core.config import load_config

    path = Path(__file__).parents[2] / "config" / "default.yaml"

    config = load_config(str(path))

    assert config.source.url.startswith("https://docs.google.com/")
    assert config.source.mirrors[-1] == "{raw}"


def test_config_missing_file():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="not found"):
        load_config("/nonexistent/config.yaml")


def test_config_invalid_yaml():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="Failed to parse YAML"):
        load_config(_write("invalid: yaml: content: ["))


def test_config_empty_file():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="empty"):
        load_config(_write(""))


def test_config_missing_source_section():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="source"):
        load_config(_write("sheet:\n  layout: simple\n"))


def test_config_missing_url():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="source.url"):
        load_config(_write("source:\n  min_length: 10\n"))


def test_config_empty_mirrors():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="mirrors"):
        load_config(_write(MINIMAL_CONFIG + "  mirrors: []\n"))


def test_config_unknown_layout():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="sheet.layout"):
        load_config(_write(MINIMAL_CONFIG + "sheet:\n  layout: wide\n"))


def test_config_unknown_weight_unit():
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match="sheet.weight_unit"):
        load_config(_write(MINIMAL_CONFIG + "sheet:\n  weight_unit: basis_points\n"))


def test_config_numbers_are_coerced():
    from portfolio_dashboard.core.config import load_config

    config = load_config(_write(MINIMAL_CONFIG + "  min_length: 80.0\n  timeout_seconds: 5\n"))

    assert config.source.min_length == 80
    assert isinstance(config.source.min_length, int)
    assert isinstance(config.source.timeout_seconds, float)


@pytest.mark.parametrize("snippet,setting", [
    ('  min_length: "50"\n', "source.min_length"),
    ("  min_length: 12.5\n", "source.min_length"),
    ("  timeout_seconds: fast\n", "source.timeout_seconds"),
    ("  timeout_seconds: -1\n", "source.timeout_seconds"),
    ("refresh:\n  interval_seconds: true\n", "refresh.interval_seconds"),
    ("display:\n  top_allocations: [5]\n", "display.top_allocations"),
])
def test_config_invalid_numbers(snippet, setting):
    from portfolio_dashboard.core.config import load_config, ConfigError

    with pytest.raises(ConfigError, match=setting.replace(".", r"\.")):
        load_config(_write(MINIMAL_CONFIG + snippet))
