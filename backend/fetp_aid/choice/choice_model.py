"""Binary logit choice model — enroll vs opt out.

V_enroll  = ASC_enroll + b_program + b_career + b_mentorship + b_delivery
            + b_response + b_cost * (cost_per_trainee / 1000)
V_optout  = ASC_optout
P(enroll) = 1 / (1 + exp(V_optout - V_enroll))
"""
from __future__ import annotations

import math

from fetp_aid.coefficients.registry import CoefficientRegistry
from fetp_aid.models.coefficients import AttributeTable, CoefficientSet
from fetp_aid.models.configuration import Configuration
from fetp_aid.models.evaluation import ChoiceResult

_P_MIN = math.nextafter(0.0, 1.0)
_P_MAX = math.nextafter(1.0, 0.0)


def attribute_sum(table: AttributeTable, config: Configuration) -> float:
    """Sum the table entries for the configuration's chosen levels.

    Raises KeyError if a level is missing from the table.
    """
    return (
        table.program[config.program]
        + table.career[config.career]
        + table.mentorship[config.mentorship]
        + table.delivery[config.delivery]
        + table.response[config.response]
    )


def enroll_utility(coefs: CoefficientSet, config: Configuration) -> float:
    cost_thousands = config.cost_per_trainee / 1000.0
    return coefs.asc_enroll + attribute_sum(coefs, config) + coefs.cost_per_thousand * cost_thousands


def logistic(x: float) -> float:
    """Overflow-safe logistic sigmoid 1 / (1 + exp(-x))."""
    if math.isnan(x):
        return x
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def compute_choice(config: Configuration, coefs: CoefficientSet | None = None) -> ChoiceResult:
    """Utilities and uptake probability for one configuration."""
    if coefs is None:
        coefs = CoefficientRegistry.get().tables_for(config.preference_model).coefficients

    u_enroll = enroll_utility(coefs, config)
    u_opt_out = coefs.asc_opt_out
    diff = u_enroll - u_opt_out
    uptake = logistic(diff)
    # Keep strictly inside (0, 1) when exp() saturates; non-finite utilities propagate
    if math.isfinite(diff):
        uptake = min(max(uptake, _P_MIN), _P_MAX)

    return ChoiceResult(
        utility_enroll=u_enroll,
        utility_opt_out=u_opt_out,
        uptake_prob=uptake,
        opt_out_prob=1.0 - uptake,
    )
