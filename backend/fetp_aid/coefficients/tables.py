"""Built-in DCE coefficient and WTP tables.

Average-preference coefficients are the mixed logit estimates for the
full sample. WTP values are coefficient ratios, coef / |cost_per_thousand|,
expressed in thousands per trainee per month.

The supporter tables are placeholder latent-class estimates and are marked
provisional until the class-specific estimates are confirmed. Override
either set through COEFFICIENTS_FILE (see registry.py).
"""
from __future__ import annotations

from fetp_aid.models.coefficients import CoefficientSet, PreferenceTables, WTPSet
from fetp_aid.models.configuration import PreferenceModel

TIER_MONTHS: dict[str, int] = {
    "frontline": 3,
    "intermediate": 12,
    "advanced": 24,
}
DEFAULT_DURATION_MONTHS = 12

_AVERAGE_COEFFICIENTS = {
    "asc_enroll": 0.168,
    "asc_opt_out": -0.601,
    "program": {"frontline": 0.0, "intermediate": 0.220, "advanced": 0.487},
    "career": {"certificate": 0.0, "uni": 0.017, "govpath": -0.122},
    "mentorship": {"low": 0.0, "medium": 0.453, "high": 0.640},
    "delivery": {"blended": 0.0, "inperson": -0.232, "online": -1.073},
    "response": {"30": 0.0, "15": 0.546, "7": 0.610},
    "cost_per_thousand": -0.005,
}

_AVERAGE_WTP = {
    "program": {"frontline": 0.0, "intermediate": 44.0, "advanced": 97.4},
    "career": {"certificate": 0.0, "uni": 3.4, "govpath": -24.4},
    "mentorship": {"low": 0.0, "medium": 90.6, "high": 128.0},
    "delivery": {"blended": 0.0, "inperson": -46.4, "online": -214.6},
    "response": {"30": 0.0, "15": 109.2, "7": 122.0},
}

# Provisional: pending confirmation of the supportive-class estimates.
_SUPPORTER_COEFFICIENTS = {
    "asc_enroll": 0.512,
    "asc_opt_out": -1.143,
    "program": {"frontline": 0.0, "intermediate": 0.301, "advanced": 0.593},
    "career": {"certificate": 0.0, "uni": 0.094, "govpath": 0.051},
    "mentorship": {"low": 0.0, "medium": 0.517, "high": 0.772},
    "delivery": {"blended": 0.0, "inperson": -0.148, "online": -0.716},
    "response": {"30": 0.0, "15": 0.604, "7": 0.739},
    "cost_per_thousand": -0.003,
}

_SUPPORTER_WTP = {
    "program": {"frontline": 0.0, "intermediate": 100.3, "advanced": 197.7},
    "career": {"certificate": 0.0, "uni": 31.3, "govpath": 17.0},
    "mentorship": {"low": 0.0, "medium": 172.3, "high": 257.3},
    "delivery": {"blended": 0.0, "inperson": -49.3, "online": -238.7},
    "response": {"30": 0.0, "15": 201.3, "7": 246.3},
}


def default_tables() -> dict[PreferenceModel, PreferenceTables]:
    """Return a fresh copy of the built-in tables for both preference models."""
    return {
        PreferenceModel.average: PreferenceTables(
            coefficients=CoefficientSet(**_AVERAGE_COEFFICIENTS),
            wtp=WTPSet(**_AVERAGE_WTP),
        ),
        PreferenceModel.supporters: PreferenceTables(
            coefficients=CoefficientSet(**_SUPPORTER_COEFFICIENTS),
            wtp=WTPSet(**_SUPPORTER_WTP),
            provisional=True,
        ),
    }
