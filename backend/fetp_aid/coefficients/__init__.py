"""Coefficient store — DCE tables, WTP tables, durations and cost templates."""
from fetp_aid.coefficients.registry import CoefficientRegistry
from fetp_aid.coefficients.tables import TIER_MONTHS, default_tables
from fetp_aid.coefficients.cost_templates import get_cost_template

__all__ = ["CoefficientRegistry", "TIER_MONTHS", "default_tables", "get_cost_template"]
