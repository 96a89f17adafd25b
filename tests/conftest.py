"""
Pytest configuration and shared fixtures

Provides common row data and renderer fixtures for the table tests.
"""

import pytest

from fasttable.domain.table import TableOptions
from fasttable.renderer import TableRenderer


# ===== Row Data Fixtures =====


@pytest.fixture
def animal_rows():
    """Provide the two-row animal table used throughout the tests"""
    return [
        {"Animal": "Dog", "Color": "Brown"},
        {"Animal": "Cat", "Color": "Black"},
    ]


@pytest.fixture
def user_rows():
    """Provide rows with an id column that is usually hidden"""
    return [
        {"id": 5, "Name": "bob", "Email": "bob@example.com"},
        {"id": 6, "Name": "john", "Email": "john@example.com"},
        {"id": 7, "Name": "alice", "Email": "alice@example.com"},
    ]


# ===== Renderer Fixtures =====


@pytest.fixture
def bare_options():
    """Provide options with every widget disabled"""
    return TableOptions(widgets=[])


@pytest.fixture
def bare_renderer(bare_options, animal_rows):
    """Provide a renderer loaded with animal rows and no widgets"""
    renderer = TableRenderer(bare_options)
    renderer.load_array(animal_rows)
    return renderer


@pytest.fixture
def full_renderer(animal_rows):
    """Provide a renderer loaded with animal rows and the default widgets"""
    renderer = TableRenderer()
    renderer.load_array(animal_rows)
    return renderer
