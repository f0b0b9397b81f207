"""
Record and configuration data classes for RADIUS session analysis.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .exceptions import ConfigurationError

DEFAULT_CHUNK_SIZE = 1000


@dataclass(frozen=True)
class Record:
    """One accounting session taken from a single event line.

    Attributes:
        timestamp: Session start time.
        duration: Session length in seconds (never negative).
        device_id: Calling station identifier (usually a MAC address).
        user_id: Lower-cased, trimmed user name; the grouping key.
    """

    timestamp: datetime
    duration: int
    device_id: str
    user_id: str

    @property
    def day(self) -> date:
        """Calendar day bucket of the session start."""
        return self.timestamp.date()


@dataclass(frozen=True)
class AnalysisConfig:
    """Run parameters, built once before the pipeline starts.

    Attributes:
        input_path: Log file to analyze.
        max_duration: Keep only sessions at or below this many seconds.
        min_daily_count: Keep only users with a day of at least this many sessions.
        max_workers: Extraction threads (None means CPU count).
        chunk_size: Lines handed to a worker at a time.
    """

    input_path: str
    max_duration: Optional[int] = None
    min_daily_count: Optional[int] = None
    max_workers: Optional[int] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def validate(self) -> "AnalysisConfig":
        """Check the parameters, raising ConfigurationError on the first bad one."""
        if not self.input_path:
            raise ConfigurationError("An input file is required")
        if self.max_duration is not None and self.max_duration < 0:
            raise ConfigurationError(f"Session time must not be negative: {self.max_duration}")
        if self.min_daily_count is not None and self.min_daily_count < 0:
            raise ConfigurationError(
                f"Session count must not be negative: {self.min_daily_count}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"Worker count must be positive: {self.max_workers}")
        if self.chunk_size < 1:
            raise ConfigurationError(f"Chunk size must be positive: {self.chunk_size}")
        return self
