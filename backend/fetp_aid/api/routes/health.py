from fastapi import APIRouter

from fetp_aid.coefficients.registry import CoefficientRegistry

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    registry = CoefficientRegistry.get()
    coef_status = {"status": "loaded"} if registry.is_loaded else {"status": "not_loaded"}
    return {
        "status": "ok",
        "coefficients": coef_status,
    }
