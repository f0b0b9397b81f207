#!/usr/bin/env python3
"""
RADIUS Session Burst Analyzer

Scans an NPS/RADIUS accounting log for users whose devices keep opening
short sessions (Wi-Fi band-flapping) and prints a per-user, per-day report.

Usage:
    analyze_radius_sessions.py -f iaslog.log -t 50 -c 5
"""

import argparse
import sys

from radius_analyzer import AnalysisConfig, RadiusAnalysisError, run
from radius_analyzer.logging_config import apply_verbosity, get_logger

logger = get_logger("radius_analyzer.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report users with bursts of short RADIUS sessions."
    )
    parser.add_argument("-f", "--file", required=True, help="NPS/RADIUS event log to analyze")
    parser.add_argument(
        "-t", "--sessionTime", type=int, dest="session_time",
        help="only count sessions of at most this many seconds",
    )
    parser.add_argument(
        "-c", "--sessionCount", type=int, dest="session_count",
        help="only report users with at least this many sessions on one day",
    )
    parser.add_argument(
        "-w", "--workers", type=int, help="extraction threads (default: CPU count)"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="no run summary")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    apply_verbosity(args.verbose, args.quiet)

    config = AnalysisConfig(
        input_path=args.file,
        max_duration=args.session_time,
        min_daily_count=args.session_count,
        max_workers=args.workers,
    )

    try:
        report = run(config)
    except RadiusAnalysisError as e:
        logger.error("Error: %s", e)
        return 1

    if report:
        print(report)
    else:
        logger.info("\nNo sessions matched the given filters.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
