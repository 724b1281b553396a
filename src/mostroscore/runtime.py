"""Runtime wiring: load events, compute metrics, render and optionally watch."""

from __future__ import annotations

import time
from pathlib import Path
from time import sleep
from uuid import uuid4

from mostroscore.config import Settings
from mostroscore.domain.models import MetricsReport
from mostroscore.errors import ConfigError
from mostroscore.ingest.event_log import EventLog
from mostroscore.ingest.sources import load_events
from mostroscore.logging.logger import HumanLogger
from mostroscore.logging.report_sink import JsonlReportSink, generate_html_report
from mostroscore.metrics.aggregator import compute_metrics
from mostroscore.render import render_json, render_text


def current_time() -> int:
    return int(time.time())


def ingest_sources(event_log: EventLog, sources: list[str], human_logger: HumanLogger) -> int:
    """Append every matching event from `sources`; return how many were new."""
    appended_total = 0
    for source in sources:
        events = load_events(source, on_skip=human_logger.event_skipped)
        appended = event_log.extend(events)
        human_logger.events_loaded(source, len(events), appended)
        appended_total += appended
    return appended_total


def compute_report(event_log: EventLog, now: int) -> MetricsReport:
    """Run the metrics engine over a consistent snapshot of the log."""
    snapshot = event_log.snapshot()
    return compute_metrics(snapshot.anchor_events, snapshot.order_events, now)


def publish_report(
    report: MetricsReport,
    settings: Settings,
    pubkey: str,
    now: int,
    run_id: str,
    report_sink: JsonlReportSink | None,
    human_logger: HumanLogger,
) -> None:
    """Send a freshly computed report to every configured output."""
    human_logger.metrics_updated(report)
    if report_sink is not None:
        report_sink.emit(run_id, pubkey, report)
    if settings.output_format == "json":
        print(render_json(report), flush=True)
    elif settings.output_format == "html":
        generate_html_report(report, pubkey, settings.html_report_path)
    else:
        print(render_text(report, pubkey, now), flush=True)


def run(settings: Settings, now: int | None = None) -> int:
    """Compute the report once, or keep recomputing in watch mode.

    A fixed `now` pins every computation to that instant.
    """
    human_logger = HumanLogger(level=settings.log_level)
    try:
        pubkey = settings.node_pubkey()
        if not settings.event_files:
            raise ConfigError("At least one event file is required (--events or EVENT_FILES)")
    except ConfigError as exc:
        human_logger.error(str(exc))
        return 2

    run_id = uuid4().hex
    report_sink: JsonlReportSink | None = None
    if settings.runs_dir:
        report_sink = JsonlReportSink(str(Path(settings.runs_dir) / run_id / "reports.jsonl"))

    event_log = EventLog(pubkey)
    human_logger.run_started(run_id, pubkey, settings.event_files)

    passes = 0
    try:
        ingest_sources(event_log, settings.event_files, human_logger)
        reference_time = current_time() if now is None else now
        publish_report(
            compute_report(event_log, reference_time),
            settings,
            pubkey,
            reference_time,
            run_id,
            report_sink,
            human_logger,
        )
        passes += 1
        if settings.watch:
            human_logger.listening(settings.interval_seconds)
        while settings.watch and (settings.max_passes is None or passes < settings.max_passes):
            sleep(float(settings.interval_seconds))
            passes += 1
            if ingest_sources(event_log, settings.event_files, human_logger) == 0:
                continue
            reference_time = current_time() if now is None else now
            publish_report(
                compute_report(event_log, reference_time),
                settings,
                pubkey,
                reference_time,
                run_id,
                report_sink,
                human_logger,
            )
    except KeyboardInterrupt:
        return 0
    except Exception as exc:
        human_logger.error(str(exc))
        return 1
    return 0
