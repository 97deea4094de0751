"""
Pytest configuration and fixtures.

Использование:
    pytest tests/ -v
"""

import asyncio
import re
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Добавить корень проекта в path
sys.path.insert(0, str(Path(__file__).parent.parent))

from guest_audit.browser.session import BrowserSession
from guest_audit.config import AuditConfig
from guest_audit.core.identifiers import IdGenerator
from guest_audit.core.models import RunState
from guest_audit.core.recorder import FindingRecorder


BASE_URL = "https://reserval.test"


# ═══════════════════════════════════════════════════════
# FAKE BROWSER
# ═══════════════════════════════════════════════════════

class FakeSession(BrowserSession):
    """
    Скриптуемая BrowserSession без браузера.

    По умолчанию сайт "здоров": все пути 200, текста достаточно,
    логотип виден, направление ltr.
    """

    def __init__(
        self,
        statuses: Optional[Dict[str, int]] = None,
        body_texts: Optional[Dict[str, str]] = None,
        direction: str = "ltr",
        logo_visible: bool = True,
        screenshot_fails: bool = False,
        default_status: int = 200,
        default_text: str = "Reserval travel booking. " * 10,
    ):
        self.statuses = statuses or {}
        self.body_texts = body_texts or {}
        self.direction = direction
        self.logo_visible = logo_visible
        self.screenshot_fails = screenshot_fails
        self.default_status = default_status
        self.default_text = default_text

        self.path = "/"
        self.visits: List[str] = []
        self.clicks: List[str] = []
        self.settles: List[int] = []
        self.screenshots: List[Path] = []

    async def goto(self, path: str) -> int:
        self.visits.append(path)
        self.path = path
        return self.statuses.get(path, self.default_status)

    async def settle(self, ms: int) -> None:
        self.settles.append(ms)

    def current_url(self) -> str:
        return f"{BASE_URL}{self.path}"

    async def body_text(self) -> str:
        return self.body_texts.get(self.path, self.default_text)

    async def is_visible(self, selector: str) -> bool:
        return self.logo_visible

    async def click_first_visible(self, name: re.Pattern) -> bool:
        self.clicks.append(name.pattern)
        return True

    async def layout_direction(self) -> str:
        return self.direction

    async def screenshot(self, path: Path) -> bool:
        if self.screenshot_fails:
            raise RuntimeError("screenshot target closed")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG fake")
        self.screenshots.append(path)
        return True


class SlowSession(FakeSession):
    """settle() действительно ждёт: для проверки таймаутов."""

    async def settle(self, ms: int) -> None:
        await asyncio.sleep(ms / 1000)


# ═══════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════

@pytest.fixture
def config(tmp_path):
    """Test configuration with artifacts in tmp_path."""
    return AuditConfig(
        base_url=BASE_URL,
        start_index=1,
        timezone="Africa/Cairo",
        artifacts_dir=tmp_path / "artifacts",
        headless=True,
    )


@pytest.fixture
def state():
    return RunState(
        id_generator=IdGenerator(1),
        date_found="16-10-2026",
        today=date(2026, 10, 16),
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def recorder(session, state, config):
    config.ensure_dirs()
    return FindingRecorder(session, state, config.screenshots_dir, config.platform)

