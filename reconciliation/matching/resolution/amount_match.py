"""Amount scoring for payment suggestions.

Scores how plausible a payment amount is for a contact's membership type."""

from __future__ import annotations

from typing import NamedTuple

from ..core.constants import COMMON_AMOUNTS, MEMBERSHIP_FEES


class AmountScore(NamedTuple):
    """Amount score with the range it was judged against."""

    score: float
    expected_range: str
    actual_amount: float


def generic_amount_score(amount: float) -> float:
    """Score an amount when the membership type is unknown.

    Amounts within 5 of a common membership fee score 0.4, other amounts
    between 10 and 100 score 0.2, anything else 0.
    """
    if any(abs(amount - common) <= 5 for common in COMMON_AMOUNTS):
        return 0.4

    if 10 <= amount <= 100:
        return 0.2

    return 0.0


def calculate_amount_match(amount: float, membership_type: str | None) -> AmountScore:
    """Score a payment amount against the fee range for a membership type.

    Within range the score falls from 1.0 at the midpoint to a floor of
    0.7 at the edges. Outside the range it decays linearly to 0.3 over a
    tolerance of half the range width, and is 0 beyond it.
    """
    if not membership_type or membership_type not in MEMBERSHIP_FEES:
        return AmountScore(generic_amount_score(amount), "Unknown membership type", amount)

    low, high = MEMBERSHIP_FEES[membership_type]
    score = 0.0

    if low <= amount <= high:
        midpoint = (low + high) / 2
        max_distance = (high - low) / 2
        score = max(0.7, 1 - abs(amount - midpoint) / max_distance)
    else:
        closest_boundary = low if amount < low else high
        distance = abs(amount - closest_boundary)
        tolerance = (high - low) * 0.5
        if distance <= tolerance:
            score = max(0.3, 1 - distance / tolerance)

    return AmountScore(max(0.0, min(1.0, score)), f"£{low:g}-{high:g}", amount)
