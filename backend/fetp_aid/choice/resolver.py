"""Configuration resolver — raw field values to a valid Configuration.

resolve_config() is total: any value that cannot be interpreted falls back
to its documented default instead of raising.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from fetp_aid.coefficients.tables import DEFAULT_DURATION_MONTHS, TIER_MONTHS
from fetp_aid.models.configuration import (
    CareerIncentive,
    Configuration,
    DeliveryMode,
    MentorshipLevel,
    PreferenceModel,
    ProgramTier,
    RawConfigInput,
    ResponseTime,
)

logger = logging.getLogger(__name__)

COST_MIN = 75_000.0
COST_MAX = 400_000.0
DEFAULT_COST_PER_TRAINEE = 250_000.0
DEFAULT_COHORT_SIZE = 20

E = TypeVar("E", bound=Enum)

_DEFAULT_LEVELS: dict[str, Enum] = {
    "program": ProgramTier.intermediate,
    "preference_model": PreferenceModel.average,
    "career": CareerIncentive.certificate,
    "mentorship": MentorshipLevel.low,
    "delivery": DeliveryMode.blended,
    "response": ResponseTime.days_30,
}


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def as_finite_float(value: Any) -> float | None:
    """Coerce to float; None for anything non-numeric or non-finite."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        f = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return f if math.isfinite(f) else None


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(value, (int, float)):
        return math.isfinite(value) and value != 0
    return False


def resolve_level(enum_cls: type[E], value: Any, default: E) -> E:
    """Map a raw value onto an enum level, falling back to default."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if value is None or isinstance(value, bool):
        return default
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return default


def resolve_cost(value: Any) -> float:
    cost = as_finite_float(value)
    if cost is None:
        return DEFAULT_COST_PER_TRAINEE
    return clamp(cost, COST_MIN, COST_MAX)


def resolve_cohort_size(value: Any) -> int:
    size = as_finite_float(value)
    if size is None or int(size) <= 0:
        return DEFAULT_COHORT_SIZE
    return int(size)


def duration_for(program: Any) -> int:
    key = program.value if isinstance(program, ProgramTier) else str(program)
    return TIER_MONTHS.get(key, DEFAULT_DURATION_MONTHS)


def resolve_config(raw: RawConfigInput | Mapping[str, Any] | None = None) -> Configuration:
    """Resolve raw user-supplied fields into a Configuration.

    Defaults: cohort size 20, cost 250,000 (clamped to 75,000-400,000),
    reference levels for attributes and intermediate for an unknown tier.
    Duration follows the tier: frontline 3, intermediate 12, advanced 24.
    """
    if raw is None:
        fields: Mapping[str, Any] = {}
    elif isinstance(raw, RawConfigInput):
        fields = raw.model_dump()
    elif isinstance(raw, Mapping):
        # Accepts snake_case or camelCase keys
        fields = RawConfigInput.model_validate(dict(raw)).model_dump()
    else:
        logger.debug("Unrecognised raw config of type %s; using defaults", type(raw).__name__)
        fields = {}

    levels = {
        name: resolve_level(type(default), fields.get(name), default)
        for name, default in _DEFAULT_LEVELS.items()
    }
    program = levels["program"]

    return Configuration(
        **levels,
        cohort_size=resolve_cohort_size(fields.get("cohort_size")),
        cost_per_trainee=resolve_cost(fields.get("cost_per_trainee")),
        include_opportunity_cost=as_bool(fields.get("include_opportunity_cost")),
        duration_months=duration_for(program),
    )
