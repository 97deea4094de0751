"""
Core data models for guest audit.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from .identifiers import IdGenerator


class Language(Enum):
    """Языковая версия сайта."""
    EN = "EN"
    AR = "AR"


class Priority(Enum):
    """Приоритет находки (фиксируется проверкой)."""
    URGENT = "Urgent"
    MODERATE = "Moderate"
    LOW = "Low"


class Repeated(Enum):
    YES = "Yes"
    NO = "No"


class Platform(Enum):
    """Платформа. Значения совпадают с опциями select в Notion."""
    DESKTOP_WEB = "D Web"
    MOBILE_WEB = "M Web"
    ANDROID = "Android"
    IOS = "iOS"


class Status(Enum):
    OPEN = "Open"
    FIXED = "Fixed"
    VERIFIED = "Verified"


# Порядок колонок экспорта, заголовки буквально как в Notion
COLUMNS: List[str] = [
    "No.",
    "Screenshot (Files & media, leave empty)",
    "Bug Link (Repro URL)",
    "Repeated",
    "Priority",
    "Device / Platform",
    "Description of Issue",
    "Recommendation / Fix Suggestion",
    "Status",
    "Date Found",
    "Notes / Validation Comments",
]


@dataclass
class FindingContext:
    """Всё, что проверка знает об аномалии в момент обнаружения."""

    language: Language
    priority: Priority
    url: str
    description: str
    recommendation: str
    steps: List[str]
    expected: str
    actual: str
    screenshot_instruction: str
    extra_notes: Optional[str] = None
    repeated: Repeated = Repeated.NO


@dataclass(frozen=True)
class Finding:
    """Находка аудита. Создаётся один раз FindingRecorder'ом и не меняется."""

    id: str
    url: str
    repeated: Repeated
    priority: Priority
    platform: Platform
    description: str
    recommendation: str
    status: Status
    date_found: str  # DD-MM-YYYY
    notes: str
    screenshot_file: str  # <id>.png

    def to_row(self) -> Dict[str, str]:
        """Преобразовать в строку экспорта (ключи = COLUMNS, в том же порядке)."""
        return {
            "No.": self.id,
            # Колонка для ручной загрузки файла в Notion, всегда пустая
            "Screenshot (Files & media, leave empty)": "",
            "Bug Link (Repro URL)": self.url,
            "Repeated": self.repeated.value,
            "Priority": self.priority.value,
            "Device / Platform": self.platform.value,
            "Description of Issue": self.description,
            "Recommendation / Fix Suggestion": self.recommendation,
            "Status": self.status.value,
            "Date Found": self.date_found,
            "Notes / Validation Comments": self.notes,
        }


@dataclass
class CheckResult:
    """Результат выполнения одной семьи проверок."""

    check_name: str
    completed: bool
    findings_raised: int
    duration_ms: float
    error: Optional[str] = None


@dataclass
class RunState:
    """
    Состояние одного прогона аудита.

    Один экземпляр на прогон: findings только дополняются,
    id выдаются одним генератором, дата вычисляется один раз.
    """

    id_generator: IdGenerator
    date_found: str
    today: date
    findings: List[Finding] = field(default_factory=list)

    def append(self, finding: Finding) -> None:
        self.findings.append(finding)
