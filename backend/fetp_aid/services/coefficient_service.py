"""Coefficient management service.

Facade for loading the coefficient registry and reading its tables.
"""
from __future__ import annotations

import logging
from typing import Any

from fetp_aid.coefficients.registry import CoefficientRegistry
from fetp_aid.models.coefficients import PreferenceTables
from fetp_aid.models.configuration import PreferenceModel

logger = logging.getLogger(__name__)


def initialize_coefficients(path: str | None = None) -> None:
    """Load coefficient tables at startup."""
    registry = CoefficientRegistry.get()
    registry.load(path)
    logger.info("Coefficients initialized — status: %s", registry.get_status().get("status"))


def get_coefficient_status() -> dict[str, Any]:
    """Return current coefficient registry status for API consumption."""
    return CoefficientRegistry.get().get_status()


def get_preference_tables(model: PreferenceModel) -> PreferenceTables:
    return CoefficientRegistry.get().tables_for(model)
