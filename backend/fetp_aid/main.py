from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fetp_aid.config import settings
from fetp_aid.services.coefficient_service import initialize_coefficients
from fetp_aid.services.scenario_store import ScenarioStore
from fetp_aid.api.routes import health, coefficients, evaluation, scenarios


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: load coefficient tables
    initialize_coefficients()
    yield


app = FastAPI(title="FETP Decision Aid", version="0.1.0", lifespan=lifespan)
app.state.scenario_store = ScenarioStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(coefficients.router, prefix="/api")
app.include_router(evaluation.router, prefix="/api")
app.include_router(scenarios.router, prefix="/api")
