from fastapi import APIRouter

from fetp_aid.models.coefficients import PreferenceTables
from fetp_aid.models.configuration import PreferenceModel
from fetp_aid.services.coefficient_service import get_coefficient_status, get_preference_tables

router = APIRouter(tags=["coefficients"])


@router.get("/coefficients/status")
def get_coefficients_status():
    """Return coefficient registry status, including provisional flags."""
    return get_coefficient_status()


@router.get("/coefficients/{preference_model}", response_model=PreferenceTables)
def get_coefficients(preference_model: PreferenceModel):
    return get_preference_tables(preference_model)
