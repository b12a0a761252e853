"""Rule-based qualitative recommendation from uptake and BCR.

Rules are evaluated in order; the first matching predicate wins.
"""
from __future__ import annotations

import math
from collections.abc import Callable

Rule = tuple[Callable[[float, float], bool], str]

STRONG_SUPPORT = (
    "Strong support and good value: high endorsement with benefits well above costs. "
    "A priority candidate for scale up."
)
BROADLY_ATTRACTIVE = (
    "Broadly attractive: majority endorsement and benefits at least cover costs."
)
SUPPORT_LOW_BCR = (
    "Reasonable support, BCR below 1: stakeholders endorse the design but benefits "
    "do not yet cover costs. Consider lower costs or stronger design features."
)
VALUE_LOW_ENDORSEMENT = (
    "Acceptable value, low endorsement: benefits cover costs but fewer than half of "
    "stakeholders would endorse. Consider design changes that raise support."
)
NOT_ATTRACTIVE = (
    "Not attractive in current form: low endorsement and benefits below costs."
)

RULES: list[Rule] = [
    (lambda uptake, bcr: bcr >= 1.2 and uptake >= 0.7, STRONG_SUPPORT),
    (lambda uptake, bcr: bcr >= 1.0 and uptake >= 0.5, BROADLY_ATTRACTIVE),
    (lambda uptake, bcr: bcr < 1.0 and uptake >= 0.5, SUPPORT_LOW_BCR),
    (lambda uptake, bcr: bcr >= 1.0 and uptake < 0.5, VALUE_LOW_ENDORSEMENT),
]


def recommend(uptake_prob: float, bcr: float, rules: list[Rule] | None = None) -> str:
    """Return the first matching recommendation, or '' for non-finite inputs."""
    if not (math.isfinite(uptake_prob) and math.isfinite(bcr)):
        return ""
    for predicate, message in rules if rules is not None else RULES:
        if predicate(uptake_prob, bcr):
            return message
    return NOT_ATTRACTIVE
