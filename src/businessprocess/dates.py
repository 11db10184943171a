"""Date formatting for state change times.

Timestamps are unix seconds, as delivered by the monitoring backend.
"""

import time as time_module
from datetime import UTC, datetime


class DateFormatter:
    """Format absolute and relative times.

    Args:
        datetime_format: ``strftime`` pattern for absolute times (UTC).
    """

    __slots__ = ("datetime_format",)

    def __init__(self, datetime_format: str = "%Y-%m-%d %H:%M:%S") -> None:
        self.datetime_format = datetime_format

    def format_datetime(self, unix_ts: float) -> str:
        """Format *unix_ts* with the configured pattern.

        Example:
            ``format_datetime(0)`` → ``"1970-01-01 00:00:00"``
        """
        return datetime.fromtimestamp(unix_ts, UTC).strftime(self.datetime_format)

    def time_since(
        self,
        unix_ts: float,
        time_only: bool = False,
        now: float | None = None,
    ) -> str:
        """Describe how long ago *unix_ts* was, in compact form.

        ``"12s"``, ``"5m 3s"``, ``"2h 7m"``; older than a day falls back
        to the date (``"Mar 04"``). Unless *time_only* is set durations are
        prefixed with ``"for "`` and dates with ``"since "``.
        """
        if now is None:
            now = time_module.time()
        delta = max(0, int(now - unix_ts))
        if delta < 60:
            text = f"{delta}s"
        elif delta < 3600:
            text = f"{delta // 60}m {delta % 60}s"
        elif delta < 86400:
            text = f"{delta // 3600}h {delta % 3600 // 60}m"
        else:
            text = datetime.fromtimestamp(unix_ts, UTC).strftime("%b %d")
            if time_only:
                return text
            return f"since {text}"
        if time_only:
            return text
        return f"for {text}"
