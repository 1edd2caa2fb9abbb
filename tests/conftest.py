"""
Pytest configuration and fixtures
"""
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def original_css():
    """A Figma export covering every kind of variable"""
    return (FIXTURES_DIR / 'original.css').read_text(encoding='utf-8')


@pytest.fixture
def expected_css():
    return (FIXTURES_DIR / 'expected.css').read_text(encoding='utf-8')


@pytest.fixture
def viewport_css():
    """Only the viewport bounds needed by the typography rules"""
    return (
        '--viewport-min-width: "320";\n'
        '--viewport-max-width: "1280";\n'
    )
