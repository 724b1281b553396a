"""Terminal and JSON renderings of a metrics report."""

from __future__ import annotations

import json
import math
from datetime import UTC, datetime

from mostroscore.domain.models import SECONDS_PER_DAY, MetricsReport
from mostroscore.ingest.filters import hex_to_npub
from mostroscore.metrics.score import SATS_PER_BTC

GAP_WARNING_DAYS = 7


def format_date(timestamp: int | None) -> str:
    if not timestamp:
        return "N/A"
    moment = datetime.fromtimestamp(timestamp, tz=UTC)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_relative_time(timestamp: int, now: int) -> str:
    """Describe how long ago `timestamp` was, in coarse buckets."""
    diff_secs = now - timestamp
    if diff_secs < 0:
        return "in the future"

    days = diff_secs // SECONDS_PER_DAY
    hours = (diff_secs % SECONDS_PER_DAY) // 3600
    if days == 0:
        if hours == 0:
            return "less than an hour ago"
        if hours == 1:
            return "1 hour ago"
        return f"{hours} hours ago"
    if days == 1:
        return "1 day ago"
    if days <= 6:
        return f"{days} days ago"
    if days <= 13:
        return "1 week ago"
    if days <= 29:
        return f"{days // 7} weeks ago"
    if days <= 59:
        return "1 month ago"
    if days <= 364:
        return f"{days // 30} months ago"
    return f"{days // 365} years ago"


def format_sats(sats: int) -> str:
    return f"{sats:,} sats"


def format_btc(sats: int) -> str:
    return f"{sats / SATS_PER_BTC:.4f} BTC"


def activity_status(days_since_last: int) -> str:
    """Liveness label for the days since the last order event."""
    if days_since_last > 30:
        return "INACTIVE"
    if days_since_last > 7:
        return "LOW ACTIVITY"
    return "ACTIVE"


def score_band(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def render_text(report: MetricsReport, pubkey: str, now: int) -> str:
    """Render the report as a plain-text block for the terminal."""
    lines = [f"Node: {hex_to_npub(pubkey)}", f"Hex:  {pubkey}", ""]

    lines.append("Longevity")
    if report.has_anchor_events and report.first_activity:
        lines.append(f"  First activity: {format_date(report.first_activity)}")
        lines.append(f"  Days active:    {report.days_active:.1f} days")
    else:
        lines.append("  First activity: N/A (no dev fee events)")
        lines.append(f"  Days active:    {report.days_active:.1f} days (estimated from orders)")

    lines.append("Liveness")
    if report.last_order_at is not None:
        relative = format_relative_time(report.last_order_at, now)
        lines.append(f"  Last trade:     {format_date(report.last_order_at)} ({relative})")
        lines.append(
            f"  Days since:     {report.days_since_last} "
            f"[{activity_status(report.days_since_last)}]"
        )
    else:
        lines.append("  Last trade:     No order events recorded")
        lines.append("  Days since:     N/A")

    lines.append("Recent activity")
    lines.append(f"  7 days:         {report.trades_7d} trades")
    lines.append(f"  30 days:        {report.trades_30d} trades")
    lines.append(f"  90 days:        {report.trades_90d} trades")

    lines.append("Activity consistency")
    lines.append(f"  Active days:    {report.active_days_30d}/30")
    gap_text = f"{report.max_inactive_gap} days"
    if report.max_inactive_gap > GAP_WARNING_DAYS:
        gap_text += " (warning)"
    lines.append(f"  Max gap:        {gap_text}")

    lines.append("Cumulative performance")
    lines.append(f"  Successful:     {report.successful_trades}")
    lines.append(
        f"  Volume:         {format_sats(report.total_volume_sats)} "
        f"({format_btc(report.total_volume_sats)})"
    )

    if report.has_trade_stats:
        lines.append("Trade statistics")
        lines.append(f"  Min:            {format_sats(report.min_trade)}")
        lines.append(f"  Max:            {format_sats(report.max_trade)}")
        lines.append(f"  Mean:           {format_sats(math.floor(report.mean_trade + 0.5))}")
        lines.append(f"  Median:         {format_sats(report.median_trade)}")

    lines.append("")
    lines.append(f"Trust score: {report.trust_score}/100 [{score_band(report.trust_score)}]")
    return "\n".join(lines)


def render_json(report: MetricsReport) -> str:
    return json.dumps(report.to_record(), sort_keys=True)
