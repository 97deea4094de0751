"""
Finding capture: screenshot + structured record.
"""

import logging
from pathlib import Path

from ..browser.session import BrowserSession
from .models import Finding, FindingContext, Platform, RunState, Status

logger = logging.getLogger(__name__)


def build_notes(context: FindingContext, file_name: str) -> str:
    """
    Собрать поле Notes / Validation Comments.

    Порядок фиксирован: язык, шаги, ожидаемое, фактическое,
    инструкция к скриншоту, Extra (только если задано), имя файла.
    """
    parts = [
        f"Language: {context.language.value}.",
        f"Steps: {' '.join(context.steps)}",
        f"Expected: {context.expected}",
        f"Actual: {context.actual}",
        f"Screenshot: {context.screenshot_instruction} Include URL bar.",
    ]
    if context.extra_notes:
        parts.append(f"Extra: {context.extra_notes}")
    parts.append(f"Local file: {file_name}")
    return " ".join(parts)


class FindingRecorder:
    """Записывает находки прогона: id, скриншот, notes, добавление в RunState."""

    def __init__(
        self,
        session: BrowserSession,
        state: RunState,
        screenshots_dir: Path,
        platform: Platform = Platform.DESKTOP_WEB,
    ):
        self.session = session
        self.state = state
        self.screenshots_dir = Path(screenshots_dir)
        self.platform = platform

    async def capture_finding(self, context: FindingContext) -> None:
        finding_id = self.state.id_generator.next_id()
        file_name = f"{finding_id}.png"

        finding = Finding(
            id=finding_id,
            url=context.url,
            repeated=context.repeated,
            priority=context.priority,
            platform=self.platform,
            description=context.description,
            recommendation=context.recommendation,
            status=Status.OPEN,
            date_found=self.state.date_found,
            notes=build_notes(context, file_name),
            screenshot_file=file_name,
        )

        try:
            captured = await self.session.screenshot(self.screenshots_dir / file_name)
            if not captured:
                logger.warning(f"⚠️  Screenshot for finding {finding_id} was not captured")
        except Exception as e:
            # Скриншот best-effort, прогон не прерываем
            logger.warning(f"⚠️  Screenshot for finding {finding_id} failed: {e}")
        finally:
            # id уже выдан: находка добавляется даже при отмене по таймауту
            self.state.append(finding)

        logger.info(
            f"Finding {finding_id} [{finding.priority.value}] "
            f"({context.language.value}) {finding.description}"
        )
