"""
Configuration for guest audit.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .core.models import Platform


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class AuditConfig:
    """Конфигурация гостевого аудита."""

    # === Target ===
    base_url: str = field(default_factory=lambda: os.getenv("BASE_URL", "https://www.reserval.com"))
    brand_name: str = "reserval"
    platform: Platform = Platform.DESKTOP_WEB

    # === Numbering & date ===
    start_index: int = field(default_factory=lambda: _env_int("START_INDEX", 1))
    timezone: str = field(default_factory=lambda: os.getenv("AUDIT_TIMEZONE", "Africa/Cairo"))

    # === Paths ===
    artifacts_dir: Path = field(default_factory=lambda: Path(os.getenv("ARTIFACTS_DIR", Path.cwd() / "artifacts")))

    # === Checks ===
    trust_paths: List[str] = field(default_factory=lambda: [
        "/contact-us",
        "/terms",
        "/privacy-policy",
        "/about-us",
    ])
    unknown_route_path: str = "/this-page-should-not-exist-xyz"
    min_content_chars: int = 50
    ok_status_min: int = 200
    ok_status_max: int = 400  # exclusive

    # === Browser ===
    headless: bool = field(default_factory=lambda: _env_bool("HEADLESS", True))
    viewport_width: int = 1440
    viewport_height: int = 900

    # === Timing ===
    settle_ms: int = 1200
    home_settle_ms: int = 2000
    action_timeout_ms: int = 15_000
    navigation_timeout_ms: int = 45_000
    step_timeout_seconds: float = 90.0  # per state / trust page, not per family

    def __post_init__(self):
        """Validate configuration."""
        self.artifacts_dir = Path(self.artifacts_dir)
        self.base_url = self.base_url.rstrip("/")

        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.start_index < 0:
            raise ValueError(f"start_index must be non-negative, got {self.start_index}")
        if self.ok_status_min >= self.ok_status_max:
            raise ValueError("ok_status_min must be lower than ok_status_max")
        if self.min_content_chars < 0:
            raise ValueError("min_content_chars must be non-negative")
        if self.step_timeout_seconds * 1000 <= self.navigation_timeout_ms:
            raise ValueError("step_timeout_seconds must exceed navigation_timeout_ms")

    @property
    def screenshots_dir(self) -> Path:
        return self.artifacts_dir / "screenshots"

    @property
    def tsv_path(self) -> Path:
        return self.artifacts_dir / "notion-import.tsv"

    @property
    def markdown_path(self) -> Path:
        return self.artifacts_dir / "weekly-report.md"

    def ensure_dirs(self) -> None:
        """Создать artifacts/ и artifacts/screenshots/ если их нет."""
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)

    def is_ok_status(self, status: int) -> bool:
        return self.ok_status_min <= status < self.ok_status_max