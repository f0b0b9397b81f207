"""
Plain-text report of per-user, per-day session counts.
"""

from datetime import date
from typing import Iterable, List

import numpy as np

from .fields import REPORT_DATE_FORMAT, SHORTEST_SESSIONS
from .filters import group_by_user_day
from .logging_config import get_logger
from .records import Record

logger = get_logger(__name__)


def shortest_durations(durations: Iterable[int], count: int = SHORTEST_SESSIONS) -> List[int]:
    """The ``count`` smallest durations, ascending."""
    values = np.fromiter(durations, dtype=np.int64)
    return [int(v) for v in np.sort(values)[:count]]


def format_day(day: date, sessions: List[Record]) -> str:
    shortest = ",".join(f"{d}s" for d in shortest_durations(r.duration for r in sessions))
    return f"{day.strftime(REPORT_DATE_FORMAT)}: {len(sessions)} sessions. Shortest: {shortest}"


def render_report(records: Iterable[Record]) -> str:
    """
    Render the final session set as text, one block per user.

    Users are listed by user_id and days in ascending order. Each user is
    assumed to use one device; the first device seen is reported.

    Returns:
        The report, or an empty string when no sessions are left.
    """
    devices = {}
    multi_device = set()

    def remember_device(record_stream):
        for record in record_stream:
            seen = devices.setdefault(record.user_id, record.device_id)
            if seen != record.device_id:
                multi_device.add(record.user_id)
            yield record

    groups = group_by_user_day(remember_device(records))

    for user_id in sorted(multi_device):
        logger.debug("User %s seen on more than one device, reporting %s", user_id, devices[user_id])

    blocks = []
    for user_id in sorted(groups):
        days = groups[user_id]
        lines = [f"{user_id} ({devices[user_id]})"]
        lines.extend(format_day(day, days[day]) for day in sorted(days))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
