import pytest

from mdjira import utils


@pytest.fixture(autouse=True)
def quiet_debug_sink():
    """verbose() is process-wide, reset it around every test."""
    utils.set_verbose(False)
    yield
    utils.set_verbose(False)


@pytest.fixture
def debug_messages():
    """Collect the renderer diagnostics instead of printing them."""
    return []


@pytest.fixture
def sample_config():
    """Return a sample configuration dictionary."""
    return {
        "verbose": False,
        "code_theme": "Midnight",
        "max_code_lines": 5,
        "inline_code_color": "#ff0000",
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Create a temporary config file with sample data."""
    import yaml

    config_file = tmp_path / "config.yaml"
    with open(config_file, "w") as f:
        yaml.dump({"general": sample_config}, f)
    return config_file
