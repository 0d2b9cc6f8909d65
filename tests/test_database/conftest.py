import pytest


@pytest.fixture(autouse=True)
def _reset_manager(clean_manager):
    """Ensure DatabaseManager is reset before and after each test."""
    yield clean_manager
