"""
Base class for audit check families.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List

from ..browser.session import BrowserSession
from ..config import AuditConfig
from .models import CheckResult, FindingContext, Language
from .recorder import FindingRecorder


class BaseCheck(ABC):
    """
    Базовый класс для семей проверок.

    Предоставляет:
    - Шаблон метода run()
    - Timeout на каждый шаг семьи (run_step), а не на семью целиком
    - Изоляцию ошибок: сбой или таймаут шага не пропускает остальные шаги,
      run() никогда не бросает исключение
    - Логирование
    """

    def __init__(
        self,
        name: str,
        language: Language,
        session: BrowserSession,
        recorder: FindingRecorder,
        config: AuditConfig,
    ):
        """
        Args:
            name: Имя проверки (для логирования и сводки)
            language: Языковой проход (EN или AR)
            session: Общая страница браузера
            recorder: Запись находок текущего прогона
            config: Конфигурация аудита
        """
        self.name = name
        self.language = language
        self.session = session
        self.recorder = recorder
        self.config = config
        self.timeout_seconds = config.step_timeout_seconds
        self.logger = logging.getLogger(f"guest_audit.{name}")
        self._raised = 0
        self._errors: List[str] = []

    @property
    def label(self) -> str:
        return f"{self.name}[{self.language.value}]"

    async def run(self) -> CheckResult:
        """
        Запустить все шаги проверки.

        Returns:
            CheckResult (completed=False, если хотя бы один шаг упал или
            превысил таймаут)
        """
        self.logger.info(f"Starting {self.label}...")
        self._raised = 0
        self._errors = []
        start_time = time.perf_counter()

        try:
            await self._check()
        except Exception as e:
            self.logger.error(f"{self.label} failed with exception: {e}", exc_info=True)
            self._errors.append(f"{type(e).__name__}: {e}")

        duration_ms = (time.perf_counter() - start_time) * 1000

        if self._errors:
            self.logger.error(
                f"{self.label} incomplete: {len(self._errors)} step(s) failed, "
                f"raised {self._raised} findings, duration={duration_ms:.2f}ms"
            )
            return CheckResult(
                check_name=self.label,
                completed=False,
                findings_raised=self._raised,
                duration_ms=duration_ms,
                error="; ".join(self._errors),
            )

        self.logger.info(
            f"Completed {self.label}: "
            f"raised {self._raised} findings, "
            f"duration={duration_ms:.2f}ms"
        )
        return CheckResult(
            check_name=self.label,
            completed=True,
            findings_raised=self._raised,
            duration_ms=duration_ms,
        )

    @abstractmethod
    async def _check(self) -> None:
        """Выполнить шаги проверки через run_step (реализуется в подклассах)."""
        pass

    async def run_step(self, step: str, action: Callable[[], Awaitable[None]]) -> bool:
        """
        Выполнить один шаг под собственным таймаутом.

        Ошибка или таймаут шага логируются и попадают в CheckResult.error;
        следующие шаги семьи выполняются как обычно.
        """
        try:
            await asyncio.wait_for(action(), timeout=self.timeout_seconds)
            return True

        except asyncio.TimeoutError:
            self.logger.error(f"{self.label} step '{step}' timed out after {self.timeout_seconds}s")
            self._errors.append(f"{step}: Timed out after {self.timeout_seconds}s")

        except Exception as e:
            self.logger.error(f"{self.label} step '{step}' failed: {e}", exc_info=True)
            self._errors.append(f"{step}: {type(e).__name__}: {e}")

        return False

    async def navigate(self, path: str) -> int:
        """goto() с ограничением navigation_timeout_ms; зависшая навигация = статус 0."""
        timeout = self.config.navigation_timeout_ms / 1000
        try:
            return await asyncio.wait_for(self.session.goto(path), timeout=timeout)
        except asyncio.TimeoutError:
            self.logger.warning(f"Navigation to {path} timed out after {timeout}s")
            return 0

    async def raise_finding(self, context: FindingContext) -> None:
        """Записать находку через recorder и учесть её в результате."""
        self._raised += 1
        await self.recorder.capture_finding(context)
