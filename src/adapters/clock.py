from datetime import UTC, datetime, timedelta


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """Clock pinned to one instant, for jobs that replay a point in time and for tests."""

    def __init__(self, fixed_time: datetime) -> None:
        if fixed_time.tzinfo is None:
            fixed_time = fixed_time.replace(tzinfo=UTC)
        self._time = fixed_time

    def now_utc(self) -> datetime:
        return self._time

    def advance(self, delta: timedelta) -> None:
        self._time = self._time + delta
