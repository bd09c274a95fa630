import pytest
from core.activity import Activity


@pytest.fixture
def make_activity():
    """Factory for activities; bounds default to the activity's own duration."""

    def _make(
        name,
        start,
        duration,
        min_duration=None,
        max_duration=None,
        flexible=True,
        locked=False,
        priority=0,
    ):
        return Activity(
            name=name,
            start=start,
            duration=duration,
            min_duration=duration if min_duration is None else min_duration,
            max_duration=duration if max_duration is None else max_duration,
            flexible=flexible,
            locked=locked,
            priority=priority,
        )

    return _make
