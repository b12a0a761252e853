"""Combined cost templates per programme tier.

Each template splits the direct programme cost of a cohort across
harmonised cost components. opp_rate is the template's own estimate of
trainee opportunity cost relative to direct cost; it is reported with the
breakdown but the evaluation itself applies the flat 1.2 loading.
"""
from __future__ import annotations

from fetp_aid.models.coefficients import CostTemplate
from fetp_aid.models.configuration import ProgramTier

_TEMPLATES: dict[ProgramTier, dict] = {
    ProgramTier.frontline: {
        "id": "frontline_combined",
        "label": "Frontline combined template (all institutions)",
        "description": "Combined frontline cost structure across all institutions.",
        "opp_rate": 1.09,
        "components": [
            {"id": "staff_core", "label": "In country programme staff salaries and benefits", "direct_share": 0.214},
            {"id": "office_equipment", "label": "Office equipment for staff and faculty", "direct_share": 0.004},
            {"id": "office_software", "label": "Office software for staff and faculty", "direct_share": 0.0004},
            {"id": "rent_utilities", "label": "Rent and utilities for staff and faculty", "direct_share": 0.024},
            {"id": "training_materials", "label": "Training materials and printing", "direct_share": 0.0006},
            {"id": "workshops", "label": "Workshops and seminars", "direct_share": 0.107},
            {"id": "travel_in_country", "label": "In country travel for faculty, mentors and trainees", "direct_share": 0.65},
        ],
    },
    ProgramTier.intermediate: {
        "id": "intermediate_combined",
        "label": "Intermediate combined template (all institutions)",
        "description": "Combined intermediate cost structure across all institutions.",
        "opp_rate": 0.35,
        "components": [
            {"id": "staff_core", "label": "In country programme staff salaries and benefits", "direct_share": 0.0924},
            {"id": "staff_other", "label": "Other salaries and benefits for consultants and advisors", "direct_share": 0.0004},
            {"id": "office_equipment", "label": "Office equipment for staff and faculty", "direct_share": 0.0064},
            {"id": "office_software", "label": "Office software for staff and faculty", "direct_share": 0.027},
            {"id": "rent_utilities", "label": "Rent and utilities for staff and faculty", "direct_share": 0.0171},
            {"id": "training_materials", "label": "Training materials and printing", "direct_share": 0.0005},
            {"id": "workshops", "label": "Workshops and seminars", "direct_share": 0.0258},
            {"id": "travel_in_country", "label": "In country travel for faculty, mentors and trainees", "direct_share": 0.57},
            {"id": "travel_international", "label": "International travel for faculty, mentors and trainees", "direct_share": 0.1299},
            {"id": "other_direct", "label": "Other direct programme expenses", "direct_share": 0.1302},
        ],
    },
    ProgramTier.advanced: {
        "id": "advanced_combined",
        "label": "Advanced combined template (all institutions)",
        "description": "Combined advanced cost structure across all institutions.",
        "opp_rate": 0.30,
        "components": [
            {"id": "staff_core", "label": "In country programme staff salaries and benefits", "direct_share": 0.165},
            {"id": "office_equipment", "label": "Office equipment for staff and faculty", "direct_share": 0.0139},
            {"id": "office_software", "label": "Office software for staff and faculty", "direct_share": 0.0184},
            {"id": "rent_utilities", "label": "Rent and utilities for staff and faculty", "direct_share": 0.0255},
            {"id": "trainee_allowances", "label": "Trainee allowances and scholarships", "direct_share": 0.0865},
            {"id": "trainee_equipment", "label": "Trainee equipment such as laptops and internet", "direct_share": 0.0035},
            {"id": "trainee_software", "label": "Trainee software licences", "direct_share": 0.0017},
            {"id": "training_materials", "label": "Training materials and printing", "direct_share": 0.0024},
            {"id": "workshops", "label": "Workshops and seminars", "direct_share": 0.0188},
            {"id": "travel_in_country", "label": "In country travel for faculty, mentors and trainees", "direct_share": 0.372},
            {"id": "travel_international", "label": "International travel for faculty, mentors and trainees", "direct_share": 0.288},
            {"id": "other_direct", "label": "Other direct programme expenses", "direct_share": 0.0043},
        ],
    },
}


def get_cost_template(tier: ProgramTier) -> CostTemplate:
    """Return the combined cost template for a tier."""
    return CostTemplate(**_TEMPLATES[tier])
