"""Date normalization: canonical UTC instants in, display strings out.

Clients submit publication dates as ``DD.MM.YYYY`` strings; the store keeps
aware UTC datetimes; responses show ``DD.MM.YYYY, HH:mm`` in the
presentation time zone.
"""

from collections.abc import Callable
from datetime import datetime, timezone, tzinfo

INPUT_DATE_FORMAT = "%d.%m.%Y"
DISPLAY_DATE_FORMAT = "%d.%m.%Y, %H:%M"
INVALID_DATE = "Invalid date"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DateNormalizer:
    """Converts between user input, canonical UTC instants and display text.

    The clock is injected so that the "submitted today" comparison is
    deterministic under test.
    """

    def __init__(
        self,
        presentation_tz: tzinfo = timezone.utc,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._tz = presentation_tz
        self._clock = clock

    def now(self) -> datetime:
        """Current instant as an aware UTC datetime."""
        current = self._clock()
        if current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        return current.astimezone(timezone.utc)

    def canonical_instant(self, value: str | datetime) -> datetime:
        """Resolve a submitted date to the UTC instant that gets stored.

        A date on today's calendar day is stamped with the exact current
        time; any other date keeps the start of its day.

        Raises:
            ValueError: If ``value`` is a string not in ``DD.MM.YYYY`` form.
        """
        if isinstance(value, datetime):
            parsed = value if value.tzinfo else value.replace(tzinfo=self._tz)
        else:
            parsed = datetime.strptime(value.strip(), INPUT_DATE_FORMAT).replace(tzinfo=self._tz)

        now = self.now()
        if parsed.astimezone(self._tz).date() == now.astimezone(self._tz).date():
            return now
        return parsed.astimezone(timezone.utc)

    def to_canonical(self, value: str | datetime) -> str:
        """ISO-8601 (with offset) rendering of :meth:`canonical_instant`."""
        return self.canonical_instant(value).isoformat(timespec="seconds")

    def to_display(self, value: object) -> str:
        """Format a timestamp as ``DD.MM.YYYY, HH:mm``.

        Never raises: anything that is not a datetime or an ISO-8601 string
        renders as ``Invalid date``.
        """
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.strip())
            except ValueError:
                return INVALID_DATE
        if not isinstance(value, datetime):
            return INVALID_DATE

        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        try:
            return value.astimezone(self._tz).strftime(DISPLAY_DATE_FORMAT)
        except (OverflowError, ValueError):
            return INVALID_DATE
