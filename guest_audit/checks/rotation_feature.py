"""
Weekly rotating feature check.

Flags only clear breakage (blank or unrendered entry page); no selectors
specific to the feature and no booking or payment steps.
"""

from ..browser.session import BrowserSession
from ..config import AuditConfig
from ..core.base_checker import BaseCheck
from ..core.models import FindingContext, Language, Priority
from ..core.recorder import FindingRecorder
from ..core.rotation import feature_path


class RotationFeatureCheck(BaseCheck):
    """Проверка feature-области недели на пустой/неотрисованный контент."""

    def __init__(
        self,
        language: Language,
        area: str,
        session: BrowserSession,
        recorder: FindingRecorder,
        config: AuditConfig,
    ):
        super().__init__("RotationFeature", language, session, recorder, config)
        self.area = area
        self.path = feature_path(area)

    async def _check(self) -> None:
        await self.run_step(self.area, self.check_feature_page)

    async def check_feature_page(self) -> None:
        await self.navigate(self.path)
        await self.session.settle(self.config.home_settle_ms)

        text = (await self.session.body_text()).strip()
        self.logger.debug(f"{self.area} ({self.path}) body text length: {len(text)}")
        if len(text) >= self.config.min_content_chars:
            return

        await self.raise_finding(FindingContext(
            language=self.language,
            priority=Priority.MODERATE,
            url=self.session.current_url(),
            description=f"Weekly rotation page looks blank or unrendered: {self.area} ({self.path}).",
            recommendation="Check client-side rendering, API calls, and errors in console/network for this section.",
            steps=[f"Open {self.path} as guest."],
            expected=f"A usable {self.area} entry page with search entry points.",
            actual="Content appears too sparse or blank, possible render/API failure.",
            screenshot_instruction="Capture full page including any loaders stuck, empty cards, and URL bar.",
        ))
