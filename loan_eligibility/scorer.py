"""
Eligibility Scorer
==================
Turns an applicant profile into an eligibility assessment:
  - Approval probability (10–95%)
  - Risk category & bank-fit category
  - Four explained risk factors with improvement hints
  - Improvement roadmap
  - Matched bank recommendations

The probability weighting and the risk-factor severity bands use their
own thresholds. Keep them separate; the factor text is guidance for the
applicant, not the scoring math.
"""

import math
import logging
from typing import Dict, List, Any, Optional

import numpy as np
import pandas as pd

from loan_eligibility.formatting import format_inr, format_count

logger = logging.getLogger(__name__)


# ─── Probability Weights (sum to 100) ───────────────────────────────────────
PROBABILITY_WEIGHTS = {
    "credit": 35,
    "loan_to_income": 25,
    "loan_burden": 20,
    "education": 20,
}

MIN_PROBABILITY = 10
MAX_PROBABILITY = 95
CREDIT_SCORE_CEILING = 900

EDUCATION_FACTORS = {
    "Post Graduate": 1.0,
    "Graduate": 0.9,
}
DEFAULT_EDUCATION_FACTOR = 0.6

# ─── Category Thresholds ────────────────────────────────────────────────────
# Risk and bank-fit breakpoints differ on purpose.
RISK_THRESHOLDS = {"low": 65, "medium": 40}
BANK_FIT_THRESHOLDS = {"good": 60, "moderate": 35}

# ─── Risk Factor Severity Bands ─────────────────────────────────────────────
CREDIT_SEVERITY_BANDS = {"low": 700, "medium": 550}
INCOME_SEVERITY_BANDS = {"low": 40000, "medium": 20000}
LOAN_COUNT_MEDIUM_MAX = 2
RATIO_SEVERITY_BANDS = {"low": 3, "medium": 6}

# Columns appended by evaluate_frame
SUMMARY_COLUMNS = ["approval_probability", "risk_category", "bank_fit_category",
                   "roadmap_length"]


# ─── Roadmap Catalog ────────────────────────────────────────────────────────

ROADMAP_STEPS = {
    "clear_debts": {
        "title": "Clear Small Debts",
        "description": "Pay off smallest loans first to reduce burden and improve credit mix",
        "duration": "30–60 days",
    },
    "improve_credit": {
        "title": "Improve Credit Score",
        "description": "Make timely payments and keep utilization below 30%",
        "duration": "60–90 days",
    },
    "emergency_savings": {
        "title": "Build Emergency Savings",
        "description": "Save at least 3 months of expenses before applying",
        "duration": "60 days",
    },
    "apply": {
        "title": "Apply to Recommended Bank",
        "description": "Use our matched bank suggestions for highest approval chances",
        "duration": "7–14 days",
    },
}


# ─── Bank Catalog ───────────────────────────────────────────────────────────
# match_score = probability + match_offset, bounded by match_cap / match_floor

RECOMMENDED_BANKS = [
    {
        "name": "State Bank of India",
        "interest_rate": "8.5% – 10.5%",
        "match_offset": 10,
        "match_cap": 95,
        "match_floor": None,
        "features": ["Lowest rates for govt employees", "Flexible tenure",
                     "Low processing fee"],
    },
    {
        "name": "Bank of Baroda",
        "interest_rate": "9.0% – 11.0%",
        "match_offset": 5,
        "match_cap": 90,
        "match_floor": None,
        "features": ["Quick disbursement", "Rural-friendly", "No hidden charges"],
    },
    {
        "name": "Punjab National Bank",
        "interest_rate": "9.5% – 11.5%",
        "match_offset": -5,
        "match_cap": None,
        "match_floor": 40,
        "features": ["Special schemes for farmers", "Doorstep service",
                     "Low collateral"],
    },
]


# ─── Sub-Factors ────────────────────────────────────────────────────────────

def loan_to_income_ratio(loan_amount: float, monthly_income: float) -> Optional[float]:
    """
    Requested principal as a multiple of annual income (unclamped).
    Returns None when income is non-positive or the ratio is not finite.
    """
    income = float(monthly_income)
    if not np.isfinite(income) or income <= 0:
        return None
    ratio = float(loan_amount) / (income * 12)
    if not np.isfinite(ratio):
        return None
    return ratio


def credit_factor(credit_score: float) -> float:
    return float(credit_score) / CREDIT_SCORE_CEILING


def loan_burden_factor(existing_loans: int) -> float:
    if existing_loans > 2:
        return 0.3
    if existing_loans > 0:
        return 0.7
    return 1.0


def education_factor(education_level: str) -> float:
    return EDUCATION_FACTORS.get(education_level, DEFAULT_EDUCATION_FACTOR)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_probability(ratio: Optional[float], credit: float,
                        burden: float, education: float) -> int:
    """
    Weighted sum of the four sub-factors on a 0–100 scale, clamped to
    [MIN_PROBABILITY, MAX_PROBABILITY]. A missing ratio earns nothing.
    """
    ratio_term = 0.0 if ratio is None else 1 - min(ratio, 1)
    raw = (
        credit * PROBABILITY_WEIGHTS["credit"] +
        ratio_term * PROBABILITY_WEIGHTS["loan_to_income"] +
        burden * PROBABILITY_WEIGHTS["loan_burden"] +
        education * PROBABILITY_WEIGHTS["education"]
    )
    # Bounds are integers, so clamping before rounding gives the same result
    clamped = float(np.clip(raw, MIN_PROBABILITY, MAX_PROBABILITY))
    return _round_half_up(clamped)


def risk_category(probability: int) -> str:
    if probability >= RISK_THRESHOLDS["low"]:
        return "Low"
    if probability >= RISK_THRESHOLDS["medium"]:
        return "Medium"
    return "High"


def bank_fit_category(probability: int) -> str:
    if probability >= BANK_FIT_THRESHOLDS["good"]:
        return "Good"
    if probability >= BANK_FIT_THRESHOLDS["moderate"]:
        return "Moderate"
    return "Poor"


# ─── Risk Factors ───────────────────────────────────────────────────────────

def _credit_score_factor(credit_score) -> Dict:
    if credit_score >= CREDIT_SEVERITY_BANDS["low"]:
        severity, judgement = "low", "healthy"
    elif credit_score >= CREDIT_SEVERITY_BANDS["medium"]:
        severity, judgement = "medium", "moderate"
    else:
        severity, judgement = "high", "below recommended threshold"

    return {
        "name": "Credit Score",
        "severity": severity,
        "description": f"Your credit score of {format_count(credit_score)} is {judgement}",
        "improvement": (
            "Pay bills on time and reduce credit utilization below 30%"
            if credit_score < CREDIT_SEVERITY_BANDS["low"]
            else "Maintain current credit habits"
        ),
    }


def _income_stability_factor(monthly_income) -> Dict:
    if monthly_income >= INCOME_SEVERITY_BANDS["low"]:
        severity = "low"
    elif monthly_income >= INCOME_SEVERITY_BANDS["medium"]:
        severity = "medium"
    else:
        severity = "high"
    meets = monthly_income >= INCOME_SEVERITY_BANDS["low"]

    return {
        "name": "Income Stability",
        "severity": severity,
        "description": (
            f"Monthly income of ₹{format_inr(monthly_income)} "
            f"{'meets' if meets else 'is below'} standard benchmarks"
        ),
        "improvement": (
            "Stable income is favorable" if meets
            else "Consider additional income sources or skill upgrades"
        ),
    }


def _loan_burden_factor(existing_loans) -> Dict:
    if existing_loans == 0:
        severity = "low"
    elif existing_loans <= LOAN_COUNT_MEDIUM_MAX:
        severity = "medium"
    else:
        severity = "high"
    burden = "high debt burden" if existing_loans > LOAN_COUNT_MEDIUM_MAX else "manageable"

    return {
        "name": "Existing Loan Burden",
        "severity": severity,
        "description": f"{format_count(existing_loans)} active loan(s) — {burden}",
        "improvement": (
            "Clear small debts to improve debt-to-income ratio"
            if existing_loans > 0
            else "No existing burden — favorable"
        ),
    }


def _loan_to_income_factor(loan_amount, ratio: Optional[float]) -> Dict:
    amount = format_inr(loan_amount)
    if ratio is None:
        return {
            "name": "Loan-to-Income Ratio",
            "severity": "high",
            "description": f"Requested ₹{amount} with no declared income to repay it",
            "improvement": "Consider a smaller loan amount or increase savings",
        }

    if ratio < RATIO_SEVERITY_BANDS["low"]:
        severity = "low"
    elif ratio < RATIO_SEVERITY_BANDS["medium"]:
        severity = "medium"
    else:
        severity = "high"

    return {
        "name": "Loan-to-Income Ratio",
        "severity": severity,
        "description": f"Requested ₹{amount} is {ratio:.1f}x your annual income",
        "improvement": (
            "Consider a smaller loan amount or increase savings"
            if ratio >= RATIO_SEVERITY_BANDS["low"]
            else "Ratio is within healthy limits"
        ),
    }


def build_risk_factors(profile, ratio: Optional[float]) -> List[Dict]:
    """Always four factors, in display order."""
    return [
        _credit_score_factor(profile["credit_score"]),
        _income_stability_factor(profile["monthly_income"]),
        _loan_burden_factor(profile["existing_loans"]),
        _loan_to_income_factor(profile["loan_amount"], ratio),
    ]


# ─── Roadmap ────────────────────────────────────────────────────────────────

def build_roadmap(existing_loans, credit_score) -> List[Dict]:
    keys = []
    if existing_loans > 0:
        keys.append("clear_debts")
    if credit_score < CREDIT_SEVERITY_BANDS["low"]:
        keys.append("improve_credit")
    keys.extend(["emergency_savings", "apply"])

    return [
        {"step": i, **ROADMAP_STEPS[key]}
        for i, key in enumerate(keys, start=1)
    ]


# ─── Bank Recommendations ───────────────────────────────────────────────────

def bank_match_score(bank: Dict, probability: int) -> int:
    score = probability + bank["match_offset"]
    if bank["match_cap"] is not None:
        score = min(bank["match_cap"], score)
    if bank["match_floor"] is not None:
        score = max(bank["match_floor"], score)
    return score


def build_bank_recommendations(probability: int) -> List[Dict]:
    return [
        {
            "name": bank["name"],
            "interest_rate": bank["interest_rate"],
            "match_score": bank_match_score(bank, probability),
            "features": list(bank["features"]),
        }
        for bank in RECOMMENDED_BANKS
    ]


# ─── Public API ─────────────────────────────────────────────────────────────

def evaluate(profile) -> Dict[str, Any]:
    """
    Score one applicant profile.

    Args:
        profile: dict (or pandas Series) with monthly_income, loan_amount,
            credit_score, existing_loans and education_level.

    Returns:
        Dict with approval_probability, risk_category, bank_fit_category,
        risk_factors, roadmap_steps and recommended_banks.
    """
    ratio = loan_to_income_ratio(profile["loan_amount"], profile["monthly_income"])
    if ratio is None:
        logger.warning(
            f"Monthly income {profile['monthly_income']} gives no usable "
            f"loan-to-income ratio; scoring it as worst case"
        )

    probability = compute_probability(
        ratio,
        credit_factor(profile["credit_score"]),
        loan_burden_factor(profile["existing_loans"]),
        education_factor(profile["education_level"]),
    )
    logger.debug(f"Approval probability {probability}% (ratio={ratio})")

    return {
        "approval_probability": probability,
        "risk_category": risk_category(probability),
        "bank_fit_category": bank_fit_category(probability),
        "risk_factors": build_risk_factors(profile, ratio),
        "roadmap_steps": build_roadmap(profile["existing_loans"],
                                       profile["credit_score"]),
        "recommended_banks": build_bank_recommendations(probability),
    }


def reevaluate_with_overrides(original, income_override: float,
                              loan_override: float) -> int:
    """Re-score with a different income and loan amount; returns the probability."""
    modified = dict(original)
    modified["monthly_income"] = income_override
    modified["loan_amount"] = loan_override
    return evaluate(modified)["approval_probability"]


def simulate_what_if(original, income: float, loan_amount: float) -> Dict:
    """Probability before and after moving the income / loan sliders."""
    before = evaluate(original)["approval_probability"]
    after = reevaluate_with_overrides(original, income, loan_amount)
    return {
        "original_probability": before,
        "new_probability": after,
        "difference": after - before,
    }


def evaluate_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Apply scoring to every row of a profile DataFrame.
    Returns the DataFrame with summary columns appended.
    """
    def _summary(row: pd.Series) -> dict:
        result = evaluate(row)
        return {
            "approval_probability": result["approval_probability"],
            "risk_category": result["risk_category"],
            "bank_fit_category": result["bank_fit_category"],
            "roadmap_length": len(result["roadmap_steps"]),
        }

    scores = pd.DataFrame(
        [_summary(row) for _, row in df.iterrows()],
        index=df.index, columns=SUMMARY_COLUMNS,
    )
    return pd.concat([df, scores], axis=1)
