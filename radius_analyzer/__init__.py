"""
RADIUS Session Burst Analyzer

A Python package for scanning NPS/RADIUS accounting logs and reporting
users whose devices open bursts of short sessions, the usual symptom of
Wi-Fi band-flapping.
"""

from .analyzer import SessionLogAnalyzer, run
from .exceptions import (
    ConfigurationError,
    RadiusAnalysisError,
    RecordParseError,
    SourceUnavailable,
)
from .extractor import extract_records, parse_record
from .fields import (
    DEVICE_FIELD,
    DURATION_FIELD,
    REQUIRED_FIELDS,
    TIMESTAMP_FIELD,
    TIMESTAMP_FORMAT,
    USER_FIELD,
)
from .filters import filter_bursts, filter_by_duration, group_by_user_day
from .records import AnalysisConfig, Record
from .report import render_report
from .source import LineSource, iter_lines

__all__ = [
    # Entry points
    "run",
    "SessionLogAnalyzer",
    # Data classes
    "AnalysisConfig",
    "Record",
    # Pipeline stages
    "LineSource",
    "iter_lines",
    "parse_record",
    "extract_records",
    "filter_by_duration",
    "filter_bursts",
    "group_by_user_day",
    "render_report",
    # Exceptions
    "RadiusAnalysisError",
    "SourceUnavailable",
    "RecordParseError",
    "ConfigurationError",
    # Fields
    "TIMESTAMP_FIELD",
    "DURATION_FIELD",
    "DEVICE_FIELD",
    "USER_FIELD",
    "REQUIRED_FIELDS",
    "TIMESTAMP_FORMAT",
]

__version__ = "1.0.0"
