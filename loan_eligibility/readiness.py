"""
Application Readiness for the eligibility results page
=======================================================
Complements the scorer with:
  - Readiness indicator (apply now, or how long to wait)
  - Eligibility gaps ranked by priority
  - Document checklist by employment type & loan purpose
"""

from typing import Dict, List

import numpy as np


# ─── Configuration ──────────────────────────────────────────────────────────
EMI_RATE_ESTIMATE = 0.02        # rough EMI as a share of principal, per month
EMI_INCOME_LIMIT = 0.5
READY_MIN_PROBABILITY = 50
GAPS_HIDDEN_FROM_PROBABILITY = 75

WAIT_LABELS = [
    (90, "Wait about 90 days"),
    (60, "Wait about 60 days"),
    (30, "Wait about 30 days"),
]
READY_LABEL = "Ready to apply now"

READINESS_REASONS = {
    "credit": "Credit score needs time to recover",
    "loans": "Too many active loans right now",
    "emi": "Estimated EMI would take over half your income",
    "savings": "Build a savings cushion on your current income",
}

GAP_MESSAGES = {
    "income_low": "Monthly income is below ₹25,000",
    "ratio_high": "Loan amount is more than 4x your annual income",
    "credit_low": "Credit score is below 600",
    "existing_high": "More than 2 active loans",
    "emi_high": "Estimated EMI exceeds 50% of monthly income",
}

BASE_DOCUMENTS = [
    "Aadhaar Card",
    "PAN Card",
    "Bank Statement (6 months)",
    "Address Proof",
    "Passport-size Photograph",
]


def estimate_emi(loan_amount: float) -> float:
    return float(loan_amount) * EMI_RATE_ESTIMATE


def _emi_too_high(profile) -> bool:
    """EMI estimate over half of income; no income always counts as too high."""
    income = float(profile["monthly_income"])
    if not np.isfinite(income) or income <= 0:
        return True
    return estimate_emi(profile["loan_amount"]) / income > EMI_INCOME_LIMIT


def _ratio_above(profile, limit: float) -> bool:
    income = float(profile["monthly_income"])
    if not np.isfinite(income) or income <= 0:
        return True
    return float(profile["loan_amount"]) / (income * 12) > limit


# ─── Readiness Indicator ────────────────────────────────────────────────────

def assess_readiness(profile, approval_probability: int) -> Dict:
    """
    Estimate how long the applicant should wait before applying.

    Returns:
        Dict with is_ready, wait_days, wait_label and reasons.
    """
    wait_days = 0
    reasons = []

    credit_score = profile["credit_score"]
    if credit_score < 550:
        wait_days = max(wait_days, 90)
        reasons.append(READINESS_REASONS["credit"])
    elif credit_score < 650:
        wait_days = max(wait_days, 60)
        reasons.append(READINESS_REASONS["credit"])

    if profile["existing_loans"] > 2:
        wait_days = max(wait_days, 60)
        reasons.append(READINESS_REASONS["loans"])

    if _emi_too_high(profile):
        wait_days = max(wait_days, 30)
        reasons.append(READINESS_REASONS["emi"])

    if profile["monthly_income"] < 20000:
        wait_days = max(wait_days, 60)
        reasons.append(READINESS_REASONS["savings"])

    wait_label = READY_LABEL
    for min_days, label in WAIT_LABELS:
        if wait_days >= min_days:
            wait_label = label
            break

    return {
        "is_ready": wait_days == 0 and approval_probability >= READY_MIN_PROBABILITY,
        "wait_days": wait_days,
        "wait_label": wait_label,
        "reasons": reasons,
    }


# ─── Eligibility Gaps ───────────────────────────────────────────────────────

def find_eligibility_gaps(profile, approval_probability: int) -> List[Dict]:
    """
    Gaps holding the applicant back, most urgent (priority 1) first.
    Nothing is reported once the probability is already strong.
    """
    if approval_probability >= GAPS_HIDDEN_FROM_PROBABILITY:
        return []

    gaps = []
    if profile["monthly_income"] < 25000:
        gaps.append({"key": "income_low", "priority": 1})
    if _ratio_above(profile, 4):
        gaps.append({"key": "ratio_high", "priority": 2})
    if profile["credit_score"] < 600:
        gaps.append({"key": "credit_low", "priority": 1})
    if profile["existing_loans"] > 2:
        gaps.append({"key": "existing_high", "priority": 2})
    if _emi_too_high(profile):
        gaps.append({"key": "emi_high", "priority": 1})

    for gap in gaps:
        gap["message"] = GAP_MESSAGES[gap["key"]]
    return sorted(gaps, key=lambda g: g["priority"])


# ─── Document Checklist ─────────────────────────────────────────────────────

def document_checklist(profile) -> List[str]:
    """Base KYC documents plus those required by employment type & purpose."""
    employment = profile.get("employment_type")
    purpose = profile.get("loan_purpose")

    conditional = [
        ("Salary Slips / Income Proof", employment == "Salaried"),
        ("ITR (2 years)", employment in ("Salaried", "Business")),
        ("Business Registration", employment in ("Business", "Self Employed")),
        ("GST Returns", employment == "Business"),
        ("Admission Letter", purpose == "Education"),
        ("Academic Marksheets", purpose == "Education" or employment == "Student"),
        ("Land Records", purpose == "Agriculture"),
        ("Crop Details", purpose == "Agriculture"),
        ("Vehicle Quotation", purpose == "Vehicle"),
        ("Property Documents", purpose == "Home"),
    ]
    return BASE_DOCUMENTS + [doc for doc, required in conditional if required]
