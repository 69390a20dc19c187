"""
Sequential Thinking Tool - Data Model

Dataclasses for a single validated thought and its optional nested metadata.
`None` always means the field was absent from the request.
"""
from typing import List, Optional, Any
from dataclasses import dataclass


# Wire names of the list-valued first principles fields, in declaration order
FIRST_PRINCIPLES_LIST_FIELDS = (
    "assumptionsIdentified",
    "assumptionsChallenged",
    "fundamentalTruths",
    "analogiesAvoided",
    "evidenceBase",
)


@dataclass
class CalibrationMetrics:
    """
    Caller-supplied accuracy and self-assessment data about past confidence scores.

    `raw` is the value exactly as submitted. It is normally an object, but a
    non-object value is kept too and simply has no recognised fields.
    """
    previous_accuracy: Optional[float] = None
    overconfidence_pattern: Any = None
    uncertainty_awareness: Optional[float] = None
    raw: Any = None

    def submitted(self) -> Any:
        """Return the metrics as they were submitted (objects are copied)."""
        if isinstance(self.raw, dict):
            return dict(self.raw)
        return self.raw


@dataclass
class FirstPrinciples:
    """Assumption analysis and ground-truth reconstruction attached to a thought."""
    assumptions_identified: Optional[List[str]] = None
    assumptions_challenged: Optional[List[str]] = None
    fundamental_truths: Optional[List[str]] = None
    analogies_avoided: Optional[List[str]] = None
    evidence_base: Optional[List[str]] = None
    reasoning_from_zero: Optional[bool] = None
    reconstructed_solution: Optional[str] = None


@dataclass
class ThoughtRecord:
    """
    A single reasoning step submitted by the calling agent.

    The four required fields and the confidence/first principles metadata are
    type-checked before a record is built. The structural pointers
    (is_revision, revises_thought, branch_from_thought, branch_id,
    needs_more_thoughts) are stored exactly as received.
    """
    thought: str
    thought_number: float
    total_thoughts: float
    next_thought_needed: bool
    is_revision: Any = None
    revises_thought: Any = None
    branch_from_thought: Any = None
    branch_id: Any = None
    needs_more_thoughts: Any = None
    confidence_score: Optional[float] = None
    confidence_reasoning: Optional[str] = None
    uncertainty_factors: Optional[List[str]] = None
    calibration_metrics: Optional[CalibrationMetrics] = None
    first_principles: Optional[FirstPrinciples] = None

    @property
    def starts_branch(self) -> bool:
        """True when the record belongs in a named branch bucket."""
        return bool(self.branch_from_thought) and bool(self.branch_id)
