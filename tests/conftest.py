import pytest
from pathlib import Path


@pytest.fixture
def test_assets_dir():
    """Get the path to test assets directory"""
    return Path(__file__).parent / "assets"
