"""
Inputs — loading assumption snapshots and checking their numeric coherence.
"""

from .loader import assumptions_from_dict, dump_assumptions, load_assumptions
from .validators import ValidationResult, validate_assumptions, validate_cash_settings

__all__ = [
    "assumptions_from_dict",
    "dump_assumptions",
    "load_assumptions",
    "ValidationResult",
    "validate_assumptions",
    "validate_cash_settings",
]
