"""
Must-not-break checks for one language pass.

States, in order, with no retries:
- Home + locale switch (RTL verification for AR)
- Header sanity (logo visible)
- Trust pages (contact, terms, privacy, about)
- Unknown-route error state
"""

import re
from functools import partial

from ..browser.session import BrowserSession
from ..config import AuditConfig
from ..core.base_checker import BaseCheck
from ..core.models import FindingContext, Language, Priority
from ..core.recorder import FindingRecorder

LOCALE_TOGGLES = {
    Language.AR: re.compile("العربية", re.IGNORECASE),
    Language.EN: re.compile("english", re.IGNORECASE),
}


class MustNotBreakCheck(BaseCheck):
    """Базовое здоровье сайта: навигация, локализация, trust pages, 404."""

    def __init__(
        self,
        language: Language,
        session: BrowserSession,
        recorder: FindingRecorder,
        config: AuditConfig,
    ):
        super().__init__("MustNotBreak", language, session, recorder, config)

    async def _check(self) -> None:
        # Каждое состояние и каждая trust page под своим таймаутом
        await self.run_step("home_locale", self.check_home_locale)
        await self.run_step("header", self.check_header)
        for path in self.config.trust_paths:
            await self.run_step(f"trust {path}", partial(self.check_trust_page, path))
        await self.run_step("unknown_route", self.check_unknown_route)

    async def check_home_locale(self) -> None:
        await self.navigate("/")
        await self.session.settle(self.config.home_settle_ms)

        switched = await self.session.click_first_visible(LOCALE_TOGGLES[self.language])
        await self.session.settle(self.config.settle_ms)
        self.logger.debug(f"Locale toggle {self.language.value} clicked: {switched}")

        if self.language != Language.AR:
            return

        # Клик мог не найтись, если AR уже сохранён в сессии: судим только по направлению
        direction = await self.session.layout_direction()
        if direction == "rtl":
            return

        await self.raise_finding(FindingContext(
            language=self.language,
            priority=Priority.URGENT,
            url=self.session.current_url(),
            description="Arabic (RTL) did not apply after switching to Arabic.",
            recommendation="Ensure Arabic toggle sets locale and RTL direction consistently on document root.",
            steps=["Open home page.", "Click العربية in header."],
            expected="UI switches to Arabic and RTL layout applies.",
            actual="RTL not applied, layout remains LTR or language does not switch.",
            screenshot_instruction="Capture header language toggle state plus hero section layout showing direction.",
        ))

    async def check_header(self) -> None:
        selector = f'img[alt*="{self.config.brand_name}" i], img[src*="logo" i]'
        if await self.session.is_visible(selector):
            return

        await self.raise_finding(FindingContext(
            language=self.language,
            priority=Priority.URGENT,
            url=self.session.current_url(),
            description="Header logo not visible, navigation may be broken.",
            recommendation="Check header layout CSS and asset loading, verify CDN and caching.",
            steps=["Open home page as guest."],
            expected="Header logo and primary navigation are visible.",
            actual="Logo not visible or header appears broken.",
            screenshot_instruction="Capture full top header and above-the-fold area.",
        ))

    async def check_trust_page(self, path: str) -> None:
        status = await self.navigate(path)
        await self.session.settle(self.config.settle_ms)
        if self.config.is_ok_status(status):
            return

        await self.raise_finding(FindingContext(
            language=self.language,
            priority=Priority.MODERATE,
            url=self.session.current_url(),
            description=f"Trust page failed to load ({path}) with status {status}.",
            recommendation="Verify routing, CDN rules, and server response for this path.",
            steps=[f"Open {path} directly as guest."],
            expected="Page loads with correct content.",
            actual=f"Navigation returned HTTP {status} or blank/unrendered content.",
            screenshot_instruction="Capture full page including any error banners and the URL bar.",
        ))

    async def check_unknown_route(self) -> None:
        path = self.config.unknown_route_path
        await self.navigate(path)
        await self.session.settle(self.config.settle_ms)

        text = (await self.session.body_text()).strip()
        if text:
            return

        await self.raise_finding(FindingContext(
            language=self.language,
            priority=Priority.LOW,
            url=self.session.current_url(),
            description="Error/empty state may be blank for unknown routes.",
            recommendation="Add a branded 404 with recovery links (home, search) in both EN and AR.",
            steps=[f"Open {path} directly."],
            expected="A friendly 404 or error page with navigation options.",
            actual="Page appears blank or unhelpful.",
            screenshot_instruction="Capture full page, show lack of content and URL bar.",
        ))
