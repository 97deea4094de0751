"""
CLI interface for Reserval Guest Audit.

Usage:
    python -m guest_audit.main                              # Full weekly run
    python -m guest_audit.main --base-url https://staging   # Other origin
    python -m guest_audit.main --start-index 120            # Continue numbering
    python -m guest_audit.main --fail-on-urgent             # Exit 1 on Urgent findings
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from guest_audit.config import AuditConfig
from guest_audit.core.models import Priority
from guest_audit.orchestrator import run_audit


# Setup logging
def setup_logging(verbose: bool = False):
    """Настроить логирование."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


logger = logging.getLogger(__name__)


def load_env(env_path: Optional[Path] = None) -> bool:
    """Загрузить .env из корня проекта (если есть) до сборки конфигурации."""
    env_path = env_path or Path(__file__).parent.parent / ".env"
    if not env_path.exists():
        return False
    load_dotenv(env_path)
    return True


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Парсинг аргументов командной строки."""
    parser = argparse.ArgumentParser(
        description='Reserval weekly guest audit (EN + AR)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  BASE_URL        Target site origin (default: https://www.reserval.com)
  START_INDEX     First finding number (default: 1)
  ARTIFACTS_DIR   Output directory (default: ./artifacts)
  AUDIT_TIMEZONE  Timezone for "Date Found" (default: Africa/Cairo)
  HEADLESS        Run browser headless (default: true)
        """
    )

    parser.add_argument('--base-url', type=str, help='Override BASE_URL')
    parser.add_argument('--start-index', type=int, help='Override START_INDEX')
    parser.add_argument('--artifacts-dir', type=str, help='Override ARTIFACTS_DIR')
    parser.add_argument('--headed', action='store_true', help='Show the browser window')
    parser.add_argument(
        '--fail-on-urgent',
        action='store_true',
        help='Exit with code 1 if any Urgent finding was recorded'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('--no-summary', action='store_true', help='Skip printing summary to console')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AuditConfig:
    """Конфигурация из окружения с переопределениями из CLI."""
    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.start_index is not None:
        overrides["start_index"] = args.start_index
    if args.artifacts_dir:
        overrides["artifacts_dir"] = Path(args.artifacts_dir)
    if args.headed:
        overrides["headless"] = False
    return AuditConfig(**overrides)


async def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция. Возвращает код выхода."""
    args = parse_args(argv)

    setup_logging(args.verbose)
    load_env()

    logger.info("Starting Reserval Guest Audit")
    logger.info("=" * 60)

    try:
        config = build_config(args)
        run = await run_audit(config)

    except KeyboardInterrupt:
        logger.warning("\n⚠️  Audit interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"❌ Audit failed with error: {e}", exc_info=True)
        return 1

    logger.info("\n✅ Audit complete!")
    logger.info(f"   Duration: {run.duration_seconds:.2f}s")
    logger.info(f"   Findings: {len(run.findings)}")

    if not args.no_summary:
        from guest_audit.reports.generator import ReportGenerator

        generator = ReportGenerator(config.tsv_path, config.markdown_path)
        generator.print_summary(
            run.findings,
            run.check_results,
            run.feature_area,
            run.duration_seconds,
            run.report_paths,
        )

    # Findings по умолчанию не считаются провалом прогона
    if args.fail_on_urgent and run.has_urgent():
        urgent_count = sum(1 for f in run.findings if f.priority == Priority.URGENT)
        logger.error(f"\n❌ {urgent_count} URGENT findings recorded!")
        return 1

    return 0


def cli():
    """Entry point for the guest-audit console script."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
