#!/usr/bin/env python3
"""Evaluate one FETP configuration from the command line.

Prints the per-cohort evaluation, the cost sensitivity table and the
national scale-up for the given inputs.

Usage:
    python scripts/evaluate_scenario.py --program advanced --mentorship high
    python scripts/evaluate_scenario.py --cost 180000 --cohorts 40 --value-per-graduate 500000
    python scripts/evaluate_scenario.py --coefficients my_tables.json --preference-model supporters
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from fetp_aid.choice.resolver import resolve_config  # noqa: E402
from fetp_aid.config import settings  # noqa: E402
from fetp_aid.models.simulation import SimulationAssumptions  # noqa: E402
from fetp_aid.services.coefficient_service import initialize_coefficients  # noqa: E402
from fetp_aid.services.evaluation_service import build_report  # noqa: E402
from fetp_aid.services.national_simulation import simulate  # noqa: E402
from fetp_aid.services.sensitivity_service import sensitivity_points  # noqa: E402

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s  %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)


def _print_section(title: str) -> None:
    print()
    print(title)
    print("-" * len(title))


def main():
    parser = argparse.ArgumentParser(description="FETP decision aid — evaluate a configuration")
    parser.add_argument("--program", default="intermediate", help="frontline | intermediate | advanced")
    parser.add_argument("--preference-model", default="average", help="average | supporters")
    parser.add_argument("--career", default="certificate", help="certificate | uni | govpath")
    parser.add_argument("--mentorship", default="low", help="low | medium | high")
    parser.add_argument("--delivery", default="blended", help="blended | inperson | online")
    parser.add_argument("--response", default="30", help="Outbreak response days: 30 | 15 | 7")
    parser.add_argument("--cohort-size", default="20", help="Trainees per cohort (default: 20)")
    parser.add_argument("--cost", default="250000", help="Cost per trainee per month (default: 250000)")
    parser.add_argument("--opportunity-cost", action="store_true", help="Apply the 20%% opportunity cost loading")
    parser.add_argument("--cohorts", default="50", help="Number of cohorts for national scale-up (default: 50)")
    parser.add_argument("--fellows-per-district", default="1")
    parser.add_argument("--value-per-graduate", default="0")
    parser.add_argument("--outbreaks-per-100", default="0")
    parser.add_argument("--value-per-outbreak", default="0")
    parser.add_argument("--completion-rate", default="1", help="Share of enrolled trainees who graduate (default: 1)")
    parser.add_argument("--response-multiplier", action="store_true", help="Scale outbreaks by response speed")
    parser.add_argument("--horizon-years", default="1", help="Years of outbreak benefit (default: 1)")
    parser.add_argument("--discount-rate", default="0", help="Annual discount rate for outbreak benefit (default: 0)")
    parser.add_argument("--coefficients", help="JSON file overriding coefficient/WTP tables")
    args = parser.parse_args()

    initialize_coefficients(args.coefficients)

    config = resolve_config({
        "program": args.program,
        "preference_model": args.preference_model,
        "career": args.career,
        "mentorship": args.mentorship,
        "delivery": args.delivery,
        "response": args.response,
        "cohort_size": args.cohort_size,
        "cost_per_trainee": args.cost,
        "include_opportunity_cost": args.opportunity_cost,
    })
    report = build_report(config)
    if report.provisional_tables:
        logger.warning("%s tables are provisional estimates", config.preference_model.value)

    _print_section("Configuration")
    for key, value in config.model_dump(mode="json").items():
        print(f"  {key:<26} {value}")

    _print_section("Per cohort")
    r = report.result
    print(f"  {'Endorsement':<26} {r.uptake_prob:.1%}")
    print(f"  {'WTP per trainee/month':<26} {report.benefits.per_trainee_benefit_per_month:,.0f}")
    print(f"  {'Total benefit':<26} {r.total_benefit:,.0f}")
    print(f"  {'Total cost':<26} {r.total_cost:,.0f}")
    print(f"  {'Net benefit':<26} {r.net_benefit:,.0f}")
    print(f"  {'BCR':<26} {r.bcr:.2f}")
    print(f"  {report.recommendation}")

    _print_section("Cost sensitivity")
    sens = pd.DataFrame([
        {
            "case": p.label,
            "cost_per_trainee": p.cost_per_trainee,
            "uptake": round(p.result.uptake_prob, 4),
            "bcr": round(p.result.bcr, 3),
            "net_benefit": round(p.result.net_benefit),
        }
        for p in sensitivity_points(config)
    ])
    print(sens.to_string(index=False))

    sim = simulate(
        config,
        r,
        args.cohorts,
        SimulationAssumptions(
            fellows_per_district=args.fellows_per_district,
            value_per_graduate=args.value_per_graduate,
            outbreaks_per_100_graduates=args.outbreaks_per_100,
            value_per_outbreak=args.value_per_outbreak,
            completion_rate=args.completion_rate,
            apply_response_multiplier=args.response_multiplier,
            planning_horizon_years=args.horizon_years,
            epi_discount_rate=args.discount_rate,
        ),
    )
    _print_section(f"National scale-up ({sim.num_cohorts} cohorts)")
    print(f"  {'Total cost':<26} {sim.total_cost:,.0f}")
    print(f"  {'Total benefit (WTP)':<26} {sim.total_benefit:,.0f}")
    print(f"  {'Net benefit (WTP)':<26} {sim.total_net:,.0f}")
    print(f"  {'Graduates':<26} {sim.effective_graduates:,.0f}")
    print(f"  {'District coverage':<26} {sim.district_coverage:,.1f}")
    print(f"  {'Outbreaks averted':<26} {sim.outbreaks_averted:,.1f}")
    print(f"  {'Epidemiological benefit':<26} {sim.epi_benefit_total:,.0f}")
    print(f"  {'Combined benefit':<26} {sim.combined_benefit:,.0f}")
    print(f"  {'Combined BCR':<26} {sim.combined_bcr:.2f}")


if __name__ == "__main__":
    main()
