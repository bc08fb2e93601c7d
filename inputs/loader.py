from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Union

from assumptions.model import AssumptionSet

logger = logging.getLogger(__name__)


def assumptions_from_dict(data: Mapping[str, Any]) -> AssumptionSet:
    """Build a validated snapshot; missing fields take the dashboard defaults."""
    return AssumptionSet.model_validate(dict(data))


def load_assumptions(path: Union[str, Path]) -> AssumptionSet:
    """
    Load an assumption snapshot saved as JSON (see dump_assumptions).
    Raises pydantic.ValidationError on unknown fields or wrong types.
    """
    text = Path(path).read_text(encoding="utf-8")
    assumptions = AssumptionSet.model_validate_json(text)
    logger.debug("Loaded assumptions from %s (%d adjusted keys)", path, len(assumptions.adjustments))
    return assumptions


def dump_assumptions(assumptions: AssumptionSet, path: Union[str, Path]) -> None:
    Path(path).write_text(assumptions.model_dump_json(indent=2), encoding="utf-8")
