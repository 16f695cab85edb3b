"""Settings parsing."""

from dataclasses import FrozenInstanceError

import pytest

from replybot.config import Settings, _split_ids


def test_split_ids_ignores_blanks():
    assert _split_ids(" vid1, vid2 ,,vid3 ") == ("vid1", "vid2", "vid3")
    assert _split_ids("") == ()


def test_settings_are_immutable():
    settings = Settings(amazon_tag="abc-21")
    with pytest.raises(FrozenInstanceError):
        settings.amazon_tag = "other"
