"""
Audit orchestrator: one run, fixed check order, exports at the end.

Order:
- Must-not-break EN, then AR
- Weekly rotation feature EN, then AR
- TSV + Markdown exports

Everything runs sequentially on one shared page; no family can stop
another one.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional

from .browser.session import BrowserSession, open_session
from .checks import MustNotBreakCheck, RotationFeatureCheck
from .config import AuditConfig
from .core.base_checker import BaseCheck
from .core.dates import format_date_found, today_in_timezone
from .core.identifiers import IdGenerator
from .core.models import CheckResult, Finding, Language, Priority, RunState
from .core.recorder import FindingRecorder
from .core.rotation import select_feature_area
from .reports.generator import ReportGenerator

logger = logging.getLogger(__name__)

LANGUAGES = [Language.EN, Language.AR]


@dataclass
class AuditRun:
    """Итог прогона."""

    findings: List[Finding]
    check_results: List[CheckResult]
    feature_area: str
    date_found: str
    report_paths: List[Path] = field(default_factory=list)
    duration_seconds: float = 0.0

    def has_urgent(self) -> bool:
        return any(f.priority == Priority.URGENT for f in self.findings)


def new_run_state(config: AuditConfig, now: Optional[datetime] = None) -> RunState:
    """Новое состояние прогона: счётчик id и дата вычисляются один раз."""
    today = today_in_timezone(config.timezone, now)
    return RunState(
        id_generator=IdGenerator(config.start_index),
        date_found=format_date_found(today),
        # Если таймзона недоступна, ротация идёт по локальной дате
        today=today or (now.date() if now else date.today()),
    )


class AuditOrchestrator:
    """Оркестратор одного прогона гостевого аудита."""

    def __init__(
        self,
        config: AuditConfig,
        session: BrowserSession,
        state: Optional[RunState] = None,
        report_generator: Optional[ReportGenerator] = None,
    ):
        """
        Args:
            config: Конфигурация аудита
            session: Общая страница браузера на весь прогон
            state: Состояние прогона (по умолчанию новое)
            report_generator: Генератор отчётов (по умолчанию пути из config)
        """
        self.config = config
        self.session = session
        self.state = state or new_run_state(config)
        self.recorder = FindingRecorder(session, self.state, config.screenshots_dir, config.platform)
        self.report_generator = report_generator or ReportGenerator(config.tsv_path, config.markdown_path)
        self.feature_area = select_feature_area(self.state.today)

    def build_checks(self) -> List[BaseCheck]:
        """Фиксированный порядок проверок."""
        checks: List[BaseCheck] = []
        for language in LANGUAGES:
            checks.append(MustNotBreakCheck(language, self.session, self.recorder, self.config))
        for language in LANGUAGES:
            checks.append(RotationFeatureCheck(language, self.feature_area, self.session, self.recorder, self.config))
        return checks

    async def run_checks(self, checks: List[BaseCheck]) -> List[CheckResult]:
        """Запустить проверки последовательно."""
        logger.info(f"Running {len(checks)} checks sequentially...")

        results = []
        for i, check in enumerate(checks, 1):
            logger.info(f"[{i}/{len(checks)}] Running {check.label}...")
            result = await check.run()
            results.append(result)

            status = "✅ COMPLETED" if result.completed else "❌ INCOMPLETE"
            logger.info(f"  {status} - Raised {result.findings_raised} findings")

        return results

    async def run(self) -> AuditRun:
        start_time = time.time()
        self.config.ensure_dirs()

        logger.info("=" * 60)
        logger.info(f"GUEST AUDIT {self.config.base_url}")
        logger.info(f"Date found: {self.state.date_found}, first id: {self.state.id_generator.peek}")
        logger.info(f"Rotation feature this week: {self.feature_area}")
        logger.info("=" * 60)

        check_results = await self.run_checks(self.build_checks())

        logger.info("\n" + "=" * 60)
        logger.info("GENERATING REPORTS")
        logger.info("=" * 60)

        report_paths = self.report_generator.generate(self.state.findings)

        return AuditRun(
            findings=list(self.state.findings),
            check_results=check_results,
            feature_area=self.feature_area,
            date_found=self.state.date_found,
            report_paths=report_paths,
            duration_seconds=time.time() - start_time,
        )


# Convenience function
async def run_audit(
    config: AuditConfig,
    session_factory: Callable = open_session,
) -> AuditRun:
    """
    Открыть браузер, выполнить прогон, закрыть браузер.

    Args:
        config: Конфигурация аудита
        session_factory: Фабрика async context manager'а сессии

    Returns:
        AuditRun
    """
    async with session_factory(config) as session:
        orchestrator = AuditOrchestrator(config, session)
        return await orchestrator.run()
