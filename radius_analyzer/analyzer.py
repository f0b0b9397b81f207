"""
Main SessionLogAnalyzer class driving the extraction, filter and report pipeline.
"""

from datetime import datetime
from typing import Iterable, Iterator, List, Optional

import numpy as np

from .extractor import extract_records
from .filters import filter_bursts, filter_by_duration
from .logging_config import get_logger
from .records import AnalysisConfig, Record
from .report import render_report
from .source import LineSource

logger = get_logger(__name__)


class SessionLogAnalyzer:
    """Finds users with bursts of short sessions in one NPS/RADIUS log."""

    def __init__(self, config: AnalysisConfig):
        self.config = config.validate()

        self.lines_read = 0
        self.records_extracted = 0
        self.records_after_duration = 0
        self.records_after_burst = 0
        self.users_reported = 0
        self.min_ts: Optional[datetime] = None
        self.max_ts: Optional[datetime] = None

    def _track_extracted(self, records: Iterable[Record]) -> Iterator[Record]:
        for record in records:
            self.records_extracted += 1
            if self.min_ts is None or record.timestamp < self.min_ts:
                self.min_ts = record.timestamp
            if self.max_ts is None or record.timestamp > self.max_ts:
                self.max_ts = record.timestamp
            yield record

    def _track_duration(self, records: Iterable[Record]) -> Iterator[Record]:
        for record in records:
            self.records_after_duration += 1
            yield record

    def collect(self) -> List[Record]:
        """Run every stage up to the report and return the surviving sessions."""
        config = self.config
        logger.info("Reading: %s", config.input_path)

        with LineSource(config.input_path) as source:
            records = extract_records(source, config.max_workers, config.chunk_size)
            records = filter_by_duration(self._track_extracted(records), config.max_duration)
            survivors = list(filter_bursts(self._track_duration(records), config.min_daily_count))
            self.lines_read = source.lines_read

        self.records_after_burst = len(survivors)
        self.users_reported = len({record.user_id for record in survivors})
        return survivors

    def analyze(self) -> str:
        """Run the whole pipeline and return the report text."""
        survivors = self.collect()
        report = render_report(survivors)
        self.log_summary(survivors)
        return report

    def log_summary(self, survivors: List[Record]) -> None:
        logger.info("\nRun Summary:")
        logger.info("  Lines read: %s", f"{self.lines_read:,}")
        logger.info("  Sessions extracted: %s", f"{self.records_extracted:,}")
        logger.info("  Lines dropped: %s", f"{self.lines_read - self.records_extracted:,}")
        if self.config.max_duration is not None:
            logger.info(
                "  Sessions <= %ds: %s", self.config.max_duration, f"{self.records_after_duration:,}"
            )
        if self.config.min_daily_count is not None:
            logger.info(
                "  Sessions of users with %d+ sessions/day: %s",
                self.config.min_daily_count,
                f"{self.records_after_burst:,}",
            )
        logger.info("  Users reported: %d", self.users_reported)

        if self.min_ts and self.max_ts:
            logger.info("  Time range: %s to %s", self.min_ts, self.max_ts)

        if survivors:
            durations = np.array([record.duration for record in survivors])
            logger.info(
                "  Reported session time: mean %.1fs, median %.1fs",
                np.mean(durations),
                np.median(durations),
            )


def run(config: AnalysisConfig) -> str:
    """Analyze ``config.input_path`` and return the report text.

    Raises:
        SourceUnavailable: if the log cannot be opened.
        ConfigurationError: if the parameters are invalid.
    """
    return SessionLogAnalyzer(config).analyze()
