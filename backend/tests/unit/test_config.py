import pytest
from pydantic import ValidationError

from dayplan.core.config import Settings


def test_default_window_hours_are_ordered():
    settings = Settings()

    assert settings.DEFAULT_WINDOW_START_HOUR < settings.DEFAULT_WINDOW_END_HOUR


def test_inverted_default_window_is_rejected():
    with pytest.raises(ValidationError):
        Settings(DEFAULT_WINDOW_START_HOUR=20, DEFAULT_WINDOW_END_HOUR=8)


def test_empty_default_window_is_rejected():
    with pytest.raises(ValidationError):
        Settings(DEFAULT_WINDOW_START_HOUR=9, DEFAULT_WINDOW_END_HOUR=9)
