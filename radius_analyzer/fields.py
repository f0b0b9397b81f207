"""
Field names, formats and patterns for NPS/RADIUS event log parsing.
"""

import re

# =============================================================================
# EVENT DOCUMENT FIELDS
# =============================================================================

EVENT_TAG = "Event"

TIMESTAMP_FIELD = "Event-Timestamp"
DURATION_FIELD = "Acct-Session-Time"
DEVICE_FIELD = "Calling-Station-Id"
USER_FIELD = "User-Name"

REQUIRED_FIELDS = (TIMESTAMP_FIELD, DURATION_FIELD, DEVICE_FIELD, USER_FIELD)

# Event-Timestamp: 10/13/2021 08:15:02
TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M:%S"
TIMESTAMP_PATTERN = re.compile(r"^[0-9]{2}/[0-9]{2}/[0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2}$")

# Acct-Session-Time: plain base-10 digits, at most ten of them
DURATION_PATTERN = re.compile(r"^[0-9]{1,10}$")

# Acct-Session-Time is a 32-bit unsigned RADIUS attribute
MAX_SESSION_TIME = 2**32 - 1

# =============================================================================
# REPORT FORMATS
# =============================================================================

# Day bucket: 13.10.2021
REPORT_DATE_FORMAT = "%d.%m.%Y"
SHORTEST_SESSIONS = 5
