"""
Browser collaborator: the four capabilities the audit needs
(navigation with status, DOM text/visibility, screenshots, layout direction).
"""

from .session import BrowserSession, PlaywrightSession, open_session

__all__ = ["BrowserSession", "PlaywrightSession", "open_session"]
