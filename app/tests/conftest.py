"""Project-wide test fixtures."""

import pytest

from tnt.i18n import reset_translator


@pytest.fixture(autouse=True)
def reset_default_translator():
    """Each test starts without a process-wide translator."""
    reset_translator()
    yield
    reset_translator()
