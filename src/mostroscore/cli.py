"""Command-line interface for mostroscore."""

from __future__ import annotations

import argparse
import sys

from mostroscore.config import OUTPUT_FORMATS, Settings, dedupe_paths, parse_paths
from mostroscore.runtime import run


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Reliability metrics for a Mostro node from its public event log"
    )
    parser.add_argument("--pubkey", type=str, help="Node pubkey (npub1... or 64 character hex)")
    parser.add_argument(
        "--events",
        action="append",
        help="Event file (JSONL or JSON array); repeat or comma-separate for several",
    )
    parser.add_argument("--format", choices=list(OUTPUT_FORMATS), help="Output format")
    parser.add_argument("--html", type=str, help="HTML report path for --format html")
    parser.add_argument("--runs-dir", type=str, help="Report history directory ('' disables)")
    parser.add_argument("--now", type=int, help="Reference unix time instead of the clock")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep polling the event files and recompute when new events appear",
    )
    parser.add_argument("--interval-seconds", type=int, help="Seconds between watch polls")
    parser.add_argument("--max-passes", type=int, help="Stop watching after this many polls")
    parser.add_argument("--log-level", type=str, help="Logging level")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    if args.max_passes is not None and not (args.watch or settings.watch):
        raise ValueError("--max-passes requires --watch")

    overrides: dict[str, object] = {}
    if args.pubkey:
        overrides["pubkey"] = args.pubkey.strip()
    if args.events:
        paths: list[str] = []
        for value in args.events:
            paths.extend(parse_paths(value))
        overrides["event_files"] = dedupe_paths(paths)
    if args.format:
        overrides["output_format"] = args.format
    if args.html:
        overrides["html_report_path"] = args.html
    if args.runs_dir is not None:
        overrides["runs_dir"] = args.runs_dir.strip()
    if args.watch:
        overrides["watch"] = True
    if args.interval_seconds is not None:
        overrides["interval_seconds"] = args.interval_seconds
    if args.max_passes is not None:
        overrides["max_passes"] = args.max_passes
    if args.log_level:
        overrides["log_level"] = args.log_level.strip().upper()
    if args.now is not None and args.now < 0:
        raise ValueError("--now must not be negative")

    return settings.with_overrides(**overrides)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        return 2
    return run(settings, now=args.now)


if __name__ == "__main__":
    sys.exit(main())
