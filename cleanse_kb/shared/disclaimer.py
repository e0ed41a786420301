"""
Cleanse KB Medical Disclaimer Utilities
Deterministic rendering helpers for the safety disclaimer attached to every
protocol listing and recommendation response.

RULES (LOCKED):
1. Singular: "This protocol is for educational purposes only..."  -> protocol_count == 1
2. Plural: "These protocols are for educational purposes only..." -> protocol_count != 1
3. Severity is "high" whenever an intensive protocol is shown, else "standard".

NOTE: the copy below is reviewed text. Do not reword it in callers.
"""

from typing import Iterable, List

from pydantic import BaseModel, Field

DISCLAIMER_TITLE = "Parasite Cleanse Safety Warning"

DISCLAIMER_SINGULAR = (
    "This protocol is for educational purposes only and does not constitute medical advice. "
    "Consult a qualified healthcare provider before starting any cleanse."
)

DISCLAIMER_PLURAL = (
    "These protocols are for educational purposes only and do not constitute medical advice. "
    "Consult a qualified healthcare provider before starting any cleanse."
)

NOT_RECOMMENDED_FOR = (
    "Pregnant or breastfeeding women",
    "Children under 18 years",
    "Individuals with serious medical conditions",
    "Those taking prescription medications without medical supervision",
)

STOP_IMMEDIATELY_IF = (
    "Severe abdominal pain",
    "Persistent nausea or vomiting",
    "Signs of dehydration",
    "Any concerning symptoms",
)

SEVERITY_HIGH = "high"
SEVERITY_STANDARD = "standard"


class SafetyDisclaimer(BaseModel):
    """Disclaimer block serialized alongside protocol payloads."""
    title: str = DISCLAIMER_TITLE
    content: str
    not_recommended_for: List[str] = Field(default_factory=lambda: list(NOT_RECOMMENDED_FOR))
    stop_immediately_if: List[str] = Field(default_factory=lambda: list(STOP_IMMEDIATELY_IF))
    acknowledgment_required: bool = True
    severity: str = SEVERITY_STANDARD


def choose_disclaimer_text(protocol_count: int) -> str:
    """
    Return the disclaimer sentence for the number of protocols shown.

    Rules:
        - protocol_count == 1 -> "This protocol is..."
        - anything else       -> "These protocols are..." (covers empty listings)

    Example:
        >>> choose_disclaimer_text(1).startswith("This protocol")
        True
    """
    if protocol_count == 1:
        return DISCLAIMER_SINGULAR
    return DISCLAIMER_PLURAL


def build_safety_disclaimer(protocol_count: int, intensities: Iterable[str] = ()) -> SafetyDisclaimer:
    """
    Assemble the disclaimer block for a response.

    Args:
        protocol_count: Number of protocols in the payload.
        intensities: Intensity values of those protocols ("gentle", "moderate", "intensive").

    Returns:
        SafetyDisclaimer with singular/plural copy and severity.
    """
    severity = SEVERITY_STANDARD
    if any(str(getattr(i, "value", i)).lower() == "intensive" for i in intensities):
        severity = SEVERITY_HIGH

    return SafetyDisclaimer(
        content=choose_disclaimer_text(protocol_count),
        severity=severity,
    )
