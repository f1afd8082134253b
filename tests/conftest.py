"""Pytest configuration and fixtures."""
import pytest
from pathlib import Path
import tempfile
import yaml

from currency_converter import config as config_module


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test Converter',
            'version': '0.1.0',
        },
        'api': {
            'exchange': {
                'base_url': 'https://example.test/convert',
                'api_key': 'file-key',
                'timeout': 3,
            }
        },
        'ui': {
            'prompt': 'fx> ',
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text',
            'console': False,
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    # Cleanup
    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch, tmp_path):
    """Start every test without a loaded config or credential override."""
    monkeypatch.delenv("EXCHANGE_API_KEY", raising=False)
    # Keep the repository config.yaml (and its log file) out of unit tests
    monkeypatch.setenv("CURRENCY_CONVERTER_CONFIG", str(tmp_path / "missing-config.yaml"))
    config_module.reset_config()
    yield
    config_module.reset_config()
