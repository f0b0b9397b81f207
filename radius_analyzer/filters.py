"""
Duration and burst filters over the extracted session stream.
"""

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional

from .records import Record

UserDays = Dict[str, Dict[date, List[Record]]]


def filter_by_duration(records: Iterable[Record], max_duration: Optional[int]) -> Iterator[Record]:
    """Keep sessions no longer than ``max_duration`` seconds (all if unset)."""
    if max_duration is None:
        return iter(records)
    return (record for record in records if record.duration <= max_duration)


def group_by_user_day(records: Iterable[Record]) -> UserDays:
    """Build user_id -> (day -> sessions), keeping input order inside each day."""
    groups: UserDays = defaultdict(lambda: defaultdict(list))
    for record in records:
        groups[record.user_id][record.day].append(record)
    return groups


def has_burst(days: Dict[date, List[Record]], min_daily_count: int) -> bool:
    """True if any single day has at least ``min_daily_count`` sessions."""
    return any(len(sessions) >= min_daily_count for sessions in days.values())


def filter_bursts(records: Iterable[Record], min_daily_count: Optional[int]) -> Iterator[Record]:
    """
    Keep every session of the users who had a burst day.

    A user qualifies when at least one calendar day holds ``min_daily_count``
    or more sessions; all of that user's sessions (on every day) are then
    emitted together. Users who never reach the count are dropped entirely.
    """
    if min_daily_count is None:
        yield from records
        return

    groups = group_by_user_day(records)
    for days in groups.values():
        if has_burst(days, min_daily_count):
            for sessions in days.values():
                yield from sessions
