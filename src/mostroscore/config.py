"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Literal, Self

from dotenv import load_dotenv

from mostroscore.errors import ConfigError
from mostroscore.ingest.filters import parse_pubkey

OutputFormat = Literal["text", "json", "html"]
OUTPUT_FORMATS = ("text", "json", "html")


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse truthy environment strings."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_optional_positive_int(value: str | None, *, field_name: str) -> int | None:
    """Parse optional positive integer values from env strings."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def parse_paths(value: str | None) -> list[str]:
    """Parse comma-separated file paths."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def dedupe_paths(paths: list[str]) -> list[str]:
    """Remove duplicate paths while preserving order."""
    deduped: list[str] = []
    seen: set[str] = set()
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        deduped.append(path)
    return deduped


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    pubkey: str = ""
    event_files: list[str] = field(default_factory=list)
    output_format: OutputFormat = "text"
    html_report_path: str = "report.html"
    runs_dir: str = "runs"
    log_level: str = "INFO"
    watch: bool = False
    interval_seconds: int = 30
    max_passes: int | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            pubkey=str(os.getenv("MOSTRO_PUBKEY", "")).strip(),
            event_files=dedupe_paths(parse_paths(os.getenv("EVENT_FILES"))),
            output_format=str(os.getenv("OUTPUT_FORMAT", "text")).strip().lower(),
            html_report_path=str(os.getenv("HTML_REPORT_PATH", "report.html")).strip(),
            runs_dir=str(os.getenv("RUNS_DIR", "runs")).strip(),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
            watch=parse_bool(os.getenv("WATCH"), False),
            interval_seconds=parse_optional_positive_int(
                os.getenv("INTERVAL_SECONDS"),
                field_name="interval_seconds",
            )
            or 30,
            max_passes=parse_optional_positive_int(
                os.getenv("MAX_PASSES"),
                field_name="max_passes",
            ),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def node_pubkey(self) -> str:
        """Return the normalized hex pubkey; raises when unset or invalid."""
        if not self.pubkey:
            raise ConfigError("A node pubkey is required (--pubkey or MOSTRO_PUBKEY)")
        return parse_pubkey(self.pubkey)

    def validate(self) -> Self:
        """Validate settings fields."""
        if self.pubkey:
            parse_pubkey(self.pubkey)
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError("output_format must be one of text, json, html")
        if self.output_format == "html" and not self.html_report_path:
            raise ConfigError("html_report_path is required for html output")
        if self.interval_seconds <= 0:
            raise ConfigError("interval_seconds must be positive")
        if self.max_passes is not None and self.max_passes <= 0:
            raise ConfigError("max_passes must be positive")
        if self.max_passes is not None and not self.watch:
            raise ConfigError("max_passes is only valid in watch mode")
        return self
