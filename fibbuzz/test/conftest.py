"""
PyTest Configuration and Fixtures
"""

import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def runner():
    """Click test runner for end-to-end CLI tests"""
    return CliRunner()


@pytest.fixture
def output_lines():
    """Split CLI output into lines"""

    def _split(result):
        return result.output.splitlines()

    return _split


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "e2e: mark test as end-to-end test")
