"""
Sample Applicant Catalog
Named example profiles for the "try a sample case" selector, plus the
option lists the eligibility form offers.
"""

import logging
from typing import Dict

import pandas as pd

from loan_eligibility.readiness import (
    assess_readiness, find_eligibility_gaps, document_checklist,
)
from loan_eligibility.scorer import evaluate, evaluate_frame

logger = logging.getLogger(__name__)


EDUCATION_OPTIONS = ["10th Pass", "12th Pass", "Graduate", "Post Graduate"]
EMPLOYMENT_OPTIONS = ["Salaried", "Self Employed", "Business", "Student", "Retired"]
LOAN_PURPOSE_OPTIONS = ["Personal", "Home", "Vehicle", "Education", "Agriculture",
                        "Business"]


SAMPLE_CASES = {
    "auto-driver": {
        "title": "Auto Rickshaw Driver",
        "icon": "🛺",
        "description": "Ramesh, 42, drives an auto in Chennai. Wants ₹2,00,000 to buy a new auto.",
        "profile": {
            "monthly_income": 18000,
            "loan_amount": 200000,
            "education_level": "10th Pass",
            "existing_loans": 1,
            "credit_score": 520,
            "employment_type": "Self Employed",
            "loan_purpose": "Vehicle",
        },
    },
    "student": {
        "title": "Engineering Student",
        "icon": "🎓",
        "description": "Priya, 21, studying B.Tech in Hyderabad. Needs ₹5,00,000 for tuition fees.",
        "profile": {
            "monthly_income": 12000,
            "loan_amount": 500000,
            "education_level": "Graduate",
            "existing_loans": 0,
            "credit_score": 680,
            "employment_type": "Student",
            "loan_purpose": "Education",
        },
    },
    "farmer": {
        "title": "Small-Scale Farmer",
        "icon": "🌾",
        "description": "Suresh, 55, owns 2 acres in Punjab. Needs ₹3,00,000 for farming equipment.",
        "profile": {
            "monthly_income": 22000,
            "loan_amount": 300000,
            "education_level": "10th Pass",
            "existing_loans": 2,
            "credit_score": 480,
            "employment_type": "Self Employed",
            "loan_purpose": "Agriculture",
        },
    },
}


def get_sample_case(case_id: str) -> Dict:
    """Return a copy of one sample case so callers can edit the profile freely."""
    if case_id not in SAMPLE_CASES:
        raise KeyError(
            f"Unknown sample case '{case_id}'. "
            f"Known cases: {', '.join(SAMPLE_CASES)}"
        )
    case = SAMPLE_CASES[case_id]
    return {**case, "id": case_id, "profile": dict(case["profile"])}


def sample_cases_frame() -> pd.DataFrame:
    """All sample profiles as a scored DataFrame, one row per case."""
    records = [
        {"case_id": case_id, **case["profile"]}
        for case_id, case in SAMPLE_CASES.items()
    ]
    return evaluate_frame(pd.DataFrame(records))


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    for case_id in SAMPLE_CASES:
        case = get_sample_case(case_id)
        result = evaluate(case["profile"])
        logger.info(f"Scored sample case {case_id}")
        print(f"\n{case['icon']} {case['title']}: "
              f"{result['approval_probability']}% | Risk={result['risk_category']} "
              f"| Bank fit={result['bank_fit_category']}")
        for factor in result["risk_factors"]:
            print(f"   [{factor['severity']:>6}] {factor['name']}: {factor['description']}")
        for step in result["roadmap_steps"]:
            print(f"   {step['step']}. {step['title']} ({step['duration']})")

        probability = result["approval_probability"]
        readiness = assess_readiness(case["profile"], probability)
        print(f"   Readiness: {readiness['wait_label']}")
        for gap in find_eligibility_gaps(case["profile"], probability):
            print(f"   Gap (P{gap['priority']}): {gap['message']}")
        print(f"   Documents: {', '.join(document_checklist(case['profile']))}")


if __name__ == "__main__":
    main()
