"""
Pytest configuration and shared fixtures for RADIUS session analysis tests.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def event_line(
    timestamp="10/13/2021 08:15:02",
    duration="3",
    device="AA-BB-CC-DD-EE-FF",
    user="a@x.com",
    extra="",
):
    """Build one NPS event line; pass None to leave a field out."""
    parts = ['<Event><Computer-Name data_type="1">NPS01</Computer-Name>']
    if timestamp is not None:
        parts.append(f'<Event-Timestamp data_type="4">{timestamp}</Event-Timestamp>')
    if device is not None:
        parts.append(f'<Calling-Station-Id data_type="1">{device}</Calling-Station-Id>')
    if user is not None:
        parts.append(f'<User-Name data_type="1">{user}</User-Name>')
    if duration is not None:
        parts.append(f'<Acct-Session-Time data_type="0">{duration}</Acct-Session-Time>')
    parts.append(extra)
    parts.append("</Event>")
    return "".join(parts)


# =============================================================================
# SAMPLE LOG DATA FIXTURES
# =============================================================================

@pytest.fixture
def make_line():
    """Factory for event lines."""
    return event_line


@pytest.fixture
def sample_log_lines():
    """Mixed NPS log: sessions, unrelated events and garbage."""
    return [
        event_line(user="A@X.com", duration="3"),
        '<Event><Event-Timestamp data_type="4">10/13/2021 08:15:03</Event-Timestamp>'
        '<Packet-Type data_type="0">1</Packet-Type></Event>',
        event_line(timestamp="10/13/2021 09:00:00", user=" a@x.com ", duration="7"),
        "this is not xml at all",
        "<Event><User-Name>broken",
        event_line(timestamp="10/14/2021 10:00:00", user="b@x.com", device="11-22-33-44-55-66", duration="120"),
        "",
    ]


@pytest.fixture
def burst_log_lines():
    """Ten sessions for a@x.com on one day, one of them long; two for b@x.com."""
    durations = [3, 3, 3, 3, 3, 3, 200, 3, 3, 3]
    lines = [
        event_line(timestamp=f"10/13/2021 08:{i:02d}:00", duration=str(d))
        for i, d in enumerate(durations)
    ]
    lines.append(event_line(timestamp="10/13/2021 09:00:00", user="b@x.com", device="11-22-33-44-55-66"))
    lines.append(event_line(timestamp="10/13/2021 09:30:00", user="b@x.com", device="11-22-33-44-55-66"))
    lines.insert(4, "not a structured event {")
    return lines


# =============================================================================
# TEMPORARY FILE FIXTURES
# =============================================================================

@pytest.fixture
def temp_log_file(tmp_path, sample_log_lines):
    """Create a temporary log file for testing."""
    log_file = tmp_path / "iaslog.log"
    log_file.write_text("\n".join(sample_log_lines) + "\n")
    return log_file


@pytest.fixture
def burst_log_file(tmp_path, burst_log_lines):
    log_file = tmp_path / "burst.log"
    log_file.write_text("\n".join(burst_log_lines) + "\n")
    return log_file
