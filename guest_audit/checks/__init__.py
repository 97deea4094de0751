"""
Check families run by the orchestrator.
"""

from .must_not_break import MustNotBreakCheck
from .rotation_feature import RotationFeatureCheck

__all__ = ["MustNotBreakCheck", "RotationFeatureCheck"]
