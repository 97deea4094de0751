"""
Browser session used by the audit checks.

BrowserSession is the narrow interface the checks and the recorder rely on.
PlaywrightSession implements it on a single Chromium page. Every method
except startup degrades instead of raising: failed navigation is status 0,
missing text is "", missing elements are not visible, failed screenshots
return False.
"""

import logging
import re
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

from ..config import AuditConfig

logger = logging.getLogger(__name__)

# Сначала dir на <html>, затем вычисленное направление <body>
_LAYOUT_DIRECTION_JS = """
() => {
    const root = ((document.documentElement && document.documentElement.dir) || '').toLowerCase();
    if (root === 'rtl') return 'rtl';
    return document.body ? getComputedStyle(document.body).direction : root;
}
"""


class BrowserSession(ABC):
    """Одна страница браузера, общая для всего прогона."""

    @abstractmethod
    async def goto(self, path: str) -> int:
        """Перейти по пути; вернуть HTTP статус или 0 при сбое навигации."""

    @abstractmethod
    async def settle(self, ms: int) -> None:
        """Подождать стабилизации страницы."""

    @abstractmethod
    def current_url(self) -> str:
        pass

    @abstractmethod
    async def body_text(self) -> str:
        """Видимый текст <body> (пустая строка при ошибке)."""

    @abstractmethod
    async def is_visible(self, selector: str) -> bool:
        """Виден ли первый элемент по селектору."""

    @abstractmethod
    async def click_first_visible(self, name: re.Pattern) -> bool:
        """Кликнуть первую видимую ссылку/текст, совпадающую с name."""

    @abstractmethod
    async def layout_direction(self) -> str:
        """'rtl' или 'ltr' (пустая строка, если не удалось прочитать)."""

    @abstractmethod
    async def screenshot(self, path: Path) -> bool:
        """Скриншот всей страницы в файл. False при ошибке."""


class PlaywrightSession(BrowserSession):
    """BrowserSession поверх playwright.async_api.Page."""

    def __init__(self, page: Page, base_url: str):
        self.page = page
        self.base_url = base_url.rstrip("/")

    def _absolute(self, path: str) -> str:
        if re.match(r"^https?://", path):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def goto(self, path: str) -> int:
        url = self._absolute(path)
        try:
            response = await self.page.goto(url, wait_until="domcontentloaded")
        except Exception as e:
            logger.debug(f"Navigation to {url} failed: {e}")
            return 0
        return response.status if response else 0

    async def settle(self, ms: int) -> None:
        try:
            await self.page.wait_for_timeout(ms)
        except Exception as e:
            logger.debug(f"Settle {ms}ms failed: {e}")

    def current_url(self) -> str:
        return self.page.url

    async def body_text(self) -> str:
        try:
            return await self.page.locator("body").inner_text()
        except Exception as e:
            logger.debug(f"Cannot read body text at {self.page.url}: {e}")
            return ""

    async def is_visible(self, selector: str) -> bool:
        try:
            return await self.page.locator(selector).first.is_visible()
        except Exception as e:
            logger.debug(f"Visibility check failed for {selector!r}: {e}")
            return False

    async def click_first_visible(self, name: re.Pattern) -> bool:
        candidates = [
            self.page.get_by_role("link", name=name),
            self.page.get_by_text(name),
        ]
        for locator in candidates:
            try:
                if await locator.count() == 0:
                    continue
                first = locator.first
                if not await first.is_visible():
                    continue
                await first.click()
                return True
            except Exception as e:
                logger.debug(f"Click on {name.pattern!r} failed: {e}")
        return False

    async def layout_direction(self) -> str:
        try:
            direction = await self.page.evaluate(_LAYOUT_DIRECTION_JS)
        except Exception as e:
            logger.debug(f"Cannot read layout direction: {e}")
            return ""
        return (direction or "").lower()

    async def screenshot(self, path: Path) -> bool:
        try:
            await self.page.screenshot(path=str(path), full_page=True)
            return True
        except Exception as e:
            logger.debug(f"Screenshot {path} failed: {e}")
            return False


@asynccontextmanager
async def open_session(config: AuditConfig) -> AsyncIterator[PlaywrightSession]:
    """
    Запустить Chromium и открыть одну страницу на весь прогон.

    Ошибки запуска браузера не перехватываются: это фатальный сбой прогона.
    """
    playwright: Optional[Playwright] = None
    browser: Optional[Browser] = None
    try:
        playwright = await async_playwright().start()
        browser = await playwright.chromium.launch(headless=config.headless)
        context = await browser.new_context(
            base_url=config.base_url,
            viewport={"width": config.viewport_width, "height": config.viewport_height},
        )
        context.set_default_timeout(config.action_timeout_ms)
        context.set_default_navigation_timeout(config.navigation_timeout_ms)
        page = await context.new_page()
        logger.info(f"Browser started (headless={config.headless}, base_url={config.base_url})")
        yield PlaywrightSession(page, config.base_url)
    finally:
        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
        if playwright is not None:
            await playwright.stop()
