"""
Pydantic schemas for payment match suggestions.

Defines the payment input and the ranked suggestion output exchanged
with the reconciliation workflow.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from reconciliation.matching.core.models import Contact


class PaymentSource(str, Enum):
    """Where a payment record came from"""

    BANK_CSV = "BANK_CSV"
    STRIPE_REPORT = "STRIPE_REPORT"


class NameMatchType(str, Enum):
    """How the name evidence for a suggestion was found"""

    CUSTOMER_NAME = "customer_name"
    FORENAME_ENHANCED = "forename_enhanced"
    SURNAME_FUZZY = "surname_fuzzy"
    LEGACY = "legacy"


class PaymentData(BaseModel):
    """A parsed payment awaiting reconciliation."""

    transaction_fingerprint: str = Field(description="Stable identifier of the transaction")
    amount: float = Field(description="Payment amount in GBP")
    description: str = Field("", description="Free-text bank or processor reference")
    source: PaymentSource = Field(PaymentSource.BANK_CSV, description="Origin of the payment record")
    transaction_ref: str | None = Field(None, description="Bank or processor reference number")
    customer_name: str | None = Field(None, description="Payer name reported by a card processor")
    customer_email: str | None = Field(None, description="Payer email reported by a card processor")


class NameMatch(BaseModel):
    """Name evidence behind a suggestion."""

    score: float = Field(ge=0.0, le=1.0, description="Name score (0-1)")
    extracted_name: str = Field("", description="Name as found in the payment")
    matched_against: str = Field("", description="Contact name form it was compared with")
    match_type: NameMatchType = Field(description="How the name evidence was found")


class AmountMatch(BaseModel):
    """Amount evidence behind a suggestion."""

    score: float = Field(ge=0.0, le=1.0, description="Amount score (0-1)")
    expected_range: str = Field(description="Fee range for the contact's membership type")
    actual_amount: float = Field(description="Amount paid")


class MatchReasoning(BaseModel):
    """Why a contact was suggested."""

    name_match: NameMatch | None = None
    amount_match: AmountMatch | None = None


class MatchSuggestion(BaseModel):
    """A candidate contact for a payment."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    contact: Contact = Field(description="Suggested contact")
    confidence: float = Field(description="Weighted name and amount confidence")
    reasoning: MatchReasoning = Field(default_factory=MatchReasoning)


class MatchingResult(BaseModel):
    """Ranked suggestions for one payment."""

    suggestions: list[MatchSuggestion] = Field(default_factory=list)
    total_matches: int = Field(0, description="Candidates with any confidence, before filtering")
    processing_time_ms: float = Field(0.0, description="Time spent matching")
