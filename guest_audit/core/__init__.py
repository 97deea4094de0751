"""
Core components for guest audit.

Contains:
- Data models (Finding, FindingContext, RunState)
- Identifier, date and rotation helpers
- Finding recorder
- Base class for checks
"""
