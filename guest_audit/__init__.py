"""
Reserval Guest Audit System

Еженедельный гостевой аудит сайта бронирования:
- Must-not-break проверки (навигация, локализация, trust pages, 404)
- Два языка (EN, AR)
- Ротация одной feature-области по номеру недели
- Экспорт в TSV (Notion import) и Markdown

Usage:
    python -m guest_audit.main
"""

__version__ = "1.0.0"
