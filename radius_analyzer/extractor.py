"""
Record extraction from NPS/RADIUS event lines.

Each log line is a self-contained XML event document. Most lines belong to
event types we do not care about, so anything that does not carry all four
session fields is dropped without complaint.
"""

import os
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Optional
from xml.etree import ElementTree

from .exceptions import RecordParseError
from .fields import (
    DEVICE_FIELD,
    DURATION_FIELD,
    DURATION_PATTERN,
    EVENT_TAG,
    MAX_SESSION_TIME,
    REQUIRED_FIELDS,
    TIMESTAMP_FIELD,
    TIMESTAMP_FORMAT,
    TIMESTAMP_PATTERN,
    USER_FIELD,
)
from .logging_config import get_logger
from .records import DEFAULT_CHUNK_SIZE, Record

logger = get_logger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def extract_fields(line: str) -> Dict[str, str]:
    """Pull the text of the four session fields out of one event document.

    Raises:
        RecordParseError: if the line is not an event document or a field
            is missing or empty.
    """
    if EVENT_TAG not in line:
        raise RecordParseError("Not an event document")
    try:
        root = ElementTree.fromstring(line.strip())
    except ElementTree.ParseError as e:
        raise RecordParseError(f"Malformed event document: {e}") from e
    if _local_name(root.tag) != EVENT_TAG:
        raise RecordParseError(f"Unexpected root element {root.tag}")

    fields = {}
    for child in root:
        name = _local_name(child.tag)
        if name in REQUIRED_FIELDS and name not in fields:
            fields[name] = (child.text or "").strip()

    for name in REQUIRED_FIELDS:
        if not fields.get(name):
            raise RecordParseError("Missing field", field=name)
    return fields


def parse_timestamp(value: str) -> datetime:
    """Parse an Event-Timestamp value (MM/dd/yyyy HH:mm:ss)."""
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise RecordParseError(f"Bad timestamp {value!r}", field=TIMESTAMP_FIELD)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise RecordParseError(f"Bad timestamp {value!r}", field=TIMESTAMP_FIELD) from e


def parse_duration(value: str) -> int:
    """Parse an Acct-Session-Time value; base-10 digits, 32-bit unsigned."""
    if not DURATION_PATTERN.fullmatch(value):
        raise RecordParseError(f"Bad session time {value!r}", field=DURATION_FIELD)
    duration = int(value)
    if duration > MAX_SESSION_TIME:
        raise RecordParseError(f"Session time out of range {value!r}", field=DURATION_FIELD)
    return duration


def parse_record(line: str) -> Optional[Record]:
    """Turn one log line into a Record, or None if the line is not a session."""
    try:
        fields = extract_fields(line)
        return Record(
            timestamp=parse_timestamp(fields[TIMESTAMP_FIELD]),
            duration=parse_duration(fields[DURATION_FIELD]),
            device_id=fields[DEVICE_FIELD],
            user_id=fields[USER_FIELD].lower(),
        )
    except RecordParseError:
        return None


def parse_chunk(lines: List[str]) -> List[Record]:
    """Extract every session from a batch of lines, dropping the rest."""
    records = []
    for line in lines:
        record = parse_record(line)
        if record is not None:
            records.append(record)
    return records


def _chunked(lines: Iterable[str], size: int) -> Iterator[List[str]]:
    it = iter(lines)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


def extract_records(
    lines: Iterable[str],
    max_workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[Record]:
    """
    Extract Records from a stream of lines using a pool of worker threads.

    Lines are handed out in chunks, and no more than ``2 * max_workers``
    chunks are in flight, so memory use does not grow with the input.

    Args:
        lines: Raw log lines, typically a LineSource.
        max_workers: Number of threads (default: CPU count). 1 runs inline.
        chunk_size: Lines per unit of work.

    Yields:
        Records, in the order their chunks were read.
    """
    workers = max_workers or os.cpu_count() or 1
    chunks = _chunked(lines, chunk_size)

    if workers == 1:
        for chunk in chunks:
            yield from parse_chunk(chunk)
        return

    logger.debug("Extracting with %d worker threads, %d lines per chunk", workers, chunk_size)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        pending = deque()
        try:
            for chunk in chunks:
                pending.append(executor.submit(parse_chunk, chunk))
                if len(pending) >= workers * 2:
                    yield from pending.popleft().result()
            while pending:
                yield from pending.popleft().result()
        finally:
            for future in pending:
                future.cancel()
