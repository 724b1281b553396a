"""Concise human-readable run logger."""

from __future__ import annotations

import logging

from mostroscore.domain.models import MetricsReport


class HumanLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO") -> None:
        self._logger = logging.getLogger("mostroscore")
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def run_started(self, run_id: str, pubkey: str, sources: list[str]) -> None:
        self._logger.debug(
            "run | %s | node %s | sources %s",
            run_id,
            self._short_id(pubkey),
            ", ".join(sources),
        )

    def events_loaded(self, source: str, loaded: int, appended: int) -> None:
        self._logger.info("events | %s | loaded %d | new %d", source, loaded, appended)

    def event_skipped(self, location: str, reason: str) -> None:
        self._logger.warning("skip | %s | %s", location, reason)

    def metrics_updated(self, report: MetricsReport) -> None:
        self._logger.info(
            "metrics | anchors %d | order_events %d | unique_orders %d "
            "| successful %d | score %d/100",
            report.anchor_event_count,
            report.total_order_events,
            report.unique_orders,
            report.successful_trades,
            report.trust_score,
        )

    def listening(self, interval_seconds: int) -> None:
        self._logger.info("listening | polling sources every %ds", interval_seconds)

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    @staticmethod
    def _short_id(value: str | None, head: int = 10, tail: int = 6) -> str:
        if not value:
            return ""
        text = str(value)
        if len(text) <= head + tail + 1:
            return text
        return f"{text[:head]}...{text[-tail:]}"
