from datetime import datetime, timezone

import pytest

from clx_xms import GroupAutoUpdate, Serializer


@pytest.fixture
def serializer():
    """Fixture providing a serializer with the default config."""
    return Serializer()


@pytest.fixture
def auto_update():
    """Fixture providing a keyword auto update rule."""
    return GroupAutoUpdate(
        recipient="1111",
        add_word_pair=("kw0", "kw1"),
        remove_word_pair=("kw2", "kw3"),
    )


@pytest.fixture
def send_at():
    """Fixture providing a timestamp with sub-second precision."""
    return datetime(2016, 12, 1, 11, 3, 13, 192000, tzinfo=timezone.utc)
