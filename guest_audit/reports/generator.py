"""
Report generator for audit findings.

Generates:
- notion-import.tsv for Notion import (sanitized, one row per finding)
- weekly-report.md as a pipe table for human reading
- Console summary
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from ..core.models import COLUMNS, CheckResult, Finding, Priority

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def tsv_escape(value: Optional[str]) -> str:
    """Табы и переводы строк заменяются пробелом, чтобы не ломать строки/колонки."""
    return _NEWLINE_RE.sub(" ", (value or "").replace("\t", " "))


def write_tsv(findings: Sequence[Finding], out_path: Path) -> Path:
    lines = ["\t".join(COLUMNS)]
    for finding in findings:
        row = finding.to_row()
        lines.append("\t".join(tsv_escape(row.get(column, "")) for column in COLUMNS))

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
    return out_path


def write_markdown(findings: Sequence[Finding], out_path: Path) -> Path:
    # Значения не экранируются: "|" и переводы строк внутри ячеек ломают таблицу
    lines = [
        f"| {' | '.join(COLUMNS)} |",
        f"| {' | '.join('---' for _ in COLUMNS)} |",
    ]
    for finding in findings:
        row = finding.to_row()
        lines.append(f"| {' | '.join(row.get(column, '') for column in COLUMNS)} |")

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
    return out_path


class ReportGenerator:
    """Генератор отчётов аудита."""

    def __init__(self, tsv_path: Path, markdown_path: Path, console: Optional[Console] = None):
        """
        Args:
            tsv_path: Путь к TSV для импорта в Notion
            markdown_path: Путь к markdown отчёту
            console: Rich console для сводки (по умолчанию stdout)
        """
        self.tsv_path = Path(tsv_path)
        self.markdown_path = Path(markdown_path)
        self.console = console or Console()

    def generate(self, findings: Sequence[Finding]) -> List[Path]:
        """
        Записать оба отчёта. Сбой одного не мешает другому.

        Returns:
            Пути успешно записанных файлов
        """
        written = []
        exporters = [
            ("TSV", write_tsv, self.tsv_path),
            ("Markdown", write_markdown, self.markdown_path),
        ]

        for label, exporter, path in exporters:
            try:
                written.append(exporter(findings, path))
                logger.info(f"✅ {label} report written: {path} ({len(findings)} findings)")
            except Exception as e:
                logger.error(f"❌ {label} report failed ({path}): {e}", exc_info=True)

        return written

    def print_summary(
        self,
        findings: Sequence[Finding],
        check_results: Sequence[CheckResult],
        feature_area: str,
        duration_seconds: float,
        report_paths: Sequence[Path],
    ):
        """Вывести краткую сводку в консоль."""

        priority_emoji = {
            Priority.URGENT: "🔴",
            Priority.MODERATE: "🟡",
            Priority.LOW: "🟢",
        }

        table = Table(title="📊 Guest audit summary")
        table.add_column("Priority", style="cyan")
        table.add_column("Findings", style="green")
        for priority in Priority:
            count = sum(1 for f in findings if f.priority == priority)
            table.add_row(f"{priority_emoji[priority]} {priority.value}", str(count))
        table.add_row("Total", str(len(findings)), style="bold")
        self.console.print(table)

        checks = Table(title="Checks")
        checks.add_column("Check", style="cyan")
        checks.add_column("Status")
        checks.add_column("Findings", style="green")
        checks.add_column("Duration", style="dim")
        for result in check_results:
            status = "✅ completed" if result.completed else f"❌ {result.error}"
            checks.add_row(result.check_name, status, str(result.findings_raised), f"{result.duration_ms:.0f}ms")
        self.console.print(checks)

        self.console.print(f"Rotation feature this week: [bold]{feature_area}[/]")
        self.console.print(f"Duration: {duration_seconds:.2f}s")
        for path in report_paths:
            self.console.print(f"Report: {path}")
