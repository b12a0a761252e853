"""Evaluation API — resolve, evaluate, sensitivity and national simulation."""
from fastapi import APIRouter

from fetp_aid.choice.resolver import resolve_config
from fetp_aid.models.configuration import Configuration, RawConfigInput
from fetp_aid.models.evaluation import EvaluationReport, SensitivityPoint
from fetp_aid.models.simulation import SensitivityRequest, SimulationRequest, SimulationResult
from fetp_aid.services.evaluation_service import build_report, evaluate
from fetp_aid.services.national_simulation import simulate
from fetp_aid.services.sensitivity_service import sensitivity_points

router = APIRouter(tags=["evaluation"])


@router.post("/config/resolve", response_model=Configuration)
def resolve_configuration(raw: RawConfigInput):
    """Normalise raw inputs; never fails on malformed values."""
    return resolve_config(raw)


@router.post("/evaluate", response_model=EvaluationReport)
def evaluate_configuration(raw: RawConfigInput):
    """Uptake, WTP benefit, cost, BCR and recommendation for one cohort."""
    return build_report(resolve_config(raw))


@router.post("/sensitivity", response_model=list[SensitivityPoint])
def cost_sensitivity(raw: RawConfigInput):
    """Results at -20%, base and +20% cost per trainee."""
    return sensitivity_points(resolve_config(raw))


@router.post("/sensitivity/combined", response_model=list[SensitivityPoint])
def combined_sensitivity(request: SensitivityRequest):
    """Cost sensitivity with an endorsement override and WTP + epi BCR."""
    return sensitivity_points(
        resolve_config(request.config), request.endorsement_override, request.assumptions,
    )


@router.post("/simulate", response_model=SimulationResult)
def national_simulation(request: SimulationRequest):
    """Scale one cohort to a national programme and add epi outcomes."""
    config = resolve_config(request.config)
    return simulate(config, evaluate(config), request.num_cohorts, request.assumptions)
