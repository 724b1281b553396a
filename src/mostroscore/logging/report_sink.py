"""JSONL report history and per-run Plotly report generator."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from mostroscore.domain.models import MetricsReport
from mostroscore.ingest.filters import hex_to_npub
from mostroscore.render import format_date, score_band

_BAND_COLORS = {"green": "#2e7d32", "yellow": "#f9a825", "red": "#c62828"}


class JsonlReportSink:
    """Append-only JSONL writer for computed reports."""

    def __init__(self, path: str) -> None:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.path = output_path

    def emit(self, run_id: str, pubkey: str, report: MetricsReport) -> None:
        record = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "run_id": run_id,
            "pubkey": pubkey,
            "report": report.to_record(),
        }
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, sort_keys=True))
            handle.write("\n")


def load_reports(path: str | Path) -> list[dict[str, Any]]:
    """Load JSONL report records from disk."""
    records: list[dict[str, Any]] = []
    input_path = Path(path)
    if not input_path.exists():
        return records
    with input_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            text = line.strip()
            if not text:
                continue
            records.append(json.loads(text))
    return records


def generate_html_report(report: MetricsReport, pubkey: str, output_html_path: str) -> None:
    """Render a standalone HTML page with the report's charts."""
    output = Path(output_html_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    gauge = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=report.trust_score,
            title={"text": "Trust score"},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": _BAND_COLORS[score_band(report.trust_score)]},
            },
        )
    )

    windows = pd.DataFrame(
        {
            "window": ["7 days", "30 days", "90 days"],
            "trades": [report.trades_7d, report.trades_30d, report.trades_90d],
        }
    )
    window_bars = px.bar(windows, x="window", y="trades", title="Successful trades by window")

    html_parts = [
        "<html><head><meta charset='utf-8'><title>mostroscore report</title></head><body>",
        f"<h1>{hex_to_npub(pubkey)}</h1>",
        f"<p>{pubkey}</p>",
        "<p>",
        f"First activity: {format_date(report.first_activity)} | ",
        f"Days active: {report.days_active:.1f}",
        "" if report.has_anchor_events else " (estimated from orders)",
        f" | Active days: {report.active_days_30d}/30",
        f" | Max gap: {report.max_inactive_gap} days",
        "</p>",
        gauge.to_html(full_html=False, include_plotlyjs="cdn"),
        window_bars.to_html(full_html=False, include_plotlyjs=False),
    ]

    if report.has_trade_stats:
        stats = pd.DataFrame(
            {
                "statistic": ["min", "median", "mean", "max"],
                "sats": [
                    report.min_trade,
                    report.median_trade,
                    report.mean_trade,
                    report.max_trade,
                ],
            }
        )
        stats_bars = px.bar(stats, x="statistic", y="sats", title="Trade amounts")
        html_parts.append(stats_bars.to_html(full_html=False, include_plotlyjs=False))

    html_parts.append("</body></html>")
    output.write_text("".join(html_parts), encoding="utf-8")
