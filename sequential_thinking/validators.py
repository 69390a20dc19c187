"""
Request validation for the sequential thinking tool.

Turns an untyped tool-call payload into a ThoughtRecord, or raises
ThoughtValidationError carrying a single field-level message.

Validation is fail-fast and runs in a fixed order:
- Required fields: thought, thoughtNumber, totalThoughts, nextThoughtNeeded
- Confidence fields: confidenceScore, confidenceReasoning, uncertaintyFactors
- Nested objects: calibrationMetrics, firstPrinciples

The structural pointers (isRevision, revisesThought, branchFromThought,
branchId, needsMoreThoughts) are deliberately passed through unchecked, and
no field is ever compared against another one. Callers rely on being able to
reference thought numbers that were never submitted.
"""

import math
from typing import Any, List, Mapping, Optional

from .models import (
    FIRST_PRINCIPLES_LIST_FIELDS,
    CalibrationMetrics,
    FirstPrinciples,
    ThoughtRecord,
)


class ThoughtValidationError(ValueError):
    """Raised when a tool-call payload violates a field rule."""
    pass


def is_number(value: Any) -> bool:
    """Return True for real numbers, excluding booleans and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


class ThoughtValidator:
    """
    Validator for sequential thinking payloads.

    Thread-safe: all methods are pure functions with no shared state.
    """

    def validate(self, payload: Any) -> ThoughtRecord:
        """
        Validate a raw payload and build a ThoughtRecord from it.

        Args:
            payload: Decoded tool arguments, normally a dict with camelCase keys

        Returns:
            The validated record

        Raises:
            ThoughtValidationError: On the first rule the payload violates
        """
        data: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}

        thought = self.validate_thought_param(data.get("thought"))
        thought_number = self.validate_position_param(data.get("thoughtNumber"), "thoughtNumber")
        total_thoughts = self.validate_position_param(data.get("totalThoughts"), "totalThoughts")
        next_thought_needed = self.validate_boolean_param(
            data.get("nextThoughtNeeded"), "nextThoughtNeeded"
        )

        confidence_score = None
        if "confidenceScore" in data:
            confidence_score = self.validate_unit_interval(data["confidenceScore"], "confidenceScore")

        confidence_reasoning = None
        if "confidenceReasoning" in data:
            confidence_reasoning = self.validate_string_param(
                data["confidenceReasoning"], "confidenceReasoning"
            )

        uncertainty_factors = None
        if "uncertaintyFactors" in data:
            uncertainty_factors = self.validate_string_list(
                data["uncertaintyFactors"], "uncertaintyFactors"
            )

        calibration_metrics = None
        if "calibrationMetrics" in data:
            calibration_metrics = self.validate_calibration_metrics(data["calibrationMetrics"])

        first_principles = None
        if "firstPrinciples" in data:
            first_principles = self.validate_first_principles(data["firstPrinciples"])

        return ThoughtRecord(
            thought=thought,
            thought_number=thought_number,
            total_thoughts=total_thoughts,
            next_thought_needed=next_thought_needed,
            is_revision=data.get("isRevision"),
            revises_thought=data.get("revisesThought"),
            branch_from_thought=data.get("branchFromThought"),
            branch_id=data.get("branchId"),
            needs_more_thoughts=data.get("needsMoreThoughts"),
            confidence_score=confidence_score,
            confidence_reasoning=confidence_reasoning,
            uncertainty_factors=uncertainty_factors,
            calibration_metrics=calibration_metrics,
            first_principles=first_principles,
        )

    def validate_thought_param(self, thought: Any) -> str:
        """
        Validate the thought text.

        Raises:
            ThoughtValidationError: If thought is missing, not a string, or empty
        """
        if not isinstance(thought, str) or not thought:
            raise ThoughtValidationError("Invalid thought: must be a string")
        return thought

    def validate_position_param(self, value: Any, param_name: str) -> float:
        """
        Validate thoughtNumber or totalThoughts.

        Only the type is enforced; zero counts as missing, while negative or
        fractional values are accepted as declared by the caller.

        Raises:
            ThoughtValidationError: If the value is missing, zero or not a number
        """
        if not is_number(value) or value == 0:
            raise ThoughtValidationError(f"Invalid {param_name}: must be a number")
        return value

    def validate_boolean_param(self, value: Any, param_name: str) -> bool:
        if not isinstance(value, bool):
            raise ThoughtValidationError(f"Invalid {param_name}: must be a boolean")
        return value

    def validate_string_param(self, value: Any, param_name: str) -> str:
        if not isinstance(value, str):
            raise ThoughtValidationError(f"Invalid {param_name}: must be a string")
        return value

    def validate_unit_interval(self, value: Any, param_name: str) -> float:
        """
        Validate a confidence-like score.

        Args:
            value: The score to validate
            param_name: Dotted field name used in the error message

        Returns:
            The score, unchanged

        Raises:
            ThoughtValidationError: If the score is not a number in [0.0, 1.0]
        """
        if not is_number(value) or not 0 <= value <= 1:
            raise ThoughtValidationError(
                f"Invalid {param_name}: must be a number between 0.0 and 1.0"
            )
        return value

    def validate_string_list(self, items: Any, param_name: str) -> List[str]:
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise ThoughtValidationError(f"Invalid {param_name}: must be an array of strings")
        return list(items)

    def validate_calibration_metrics(self, metrics: Any) -> Optional[CalibrationMetrics]:
        """
        Validate the calibrationMetrics value.

        overconfidencePattern is stored without a type check; any other
        unknown keys are kept in the verbatim copy. A value that is not an
        object has no fields to check: it is kept as submitted when truthy
        and treated as absent otherwise.

        Raises:
            ThoughtValidationError: If a score is out of range
        """
        if not isinstance(metrics, Mapping):
            return CalibrationMetrics(raw=metrics) if metrics else None

        scores = {}
        for wire_name in ("previousAccuracy", "uncertaintyAwareness"):
            if wire_name in metrics:
                scores[wire_name] = self.validate_unit_interval(
                    metrics[wire_name], f"calibrationMetrics.{wire_name}"
                )

        return CalibrationMetrics(
            previous_accuracy=scores.get("previousAccuracy"),
            overconfidence_pattern=metrics.get("overconfidencePattern"),
            uncertainty_awareness=scores.get("uncertaintyAwareness"),
            raw=dict(metrics),
        )

    def validate_first_principles(self, block: Any) -> Optional[FirstPrinciples]:
        """
        Validate the firstPrinciples value.

        A value that is not an object has no fields: a truthy one yields an
        empty block, a falsy one is treated as absent.

        Raises:
            ThoughtValidationError: If any field has the wrong type
        """
        if not isinstance(block, Mapping):
            return FirstPrinciples() if block else None

        lists = {}
        for wire_name in FIRST_PRINCIPLES_LIST_FIELDS:
            if wire_name in block:
                lists[_snake_case(wire_name)] = self.validate_string_list(
                    block[wire_name], f"firstPrinciples.{wire_name}"
                )

        reasoning_from_zero: Optional[bool] = None
        if "reasoningFromZero" in block:
            reasoning_from_zero = self.validate_boolean_param(
                block["reasoningFromZero"], "firstPrinciples.reasoningFromZero"
            )

        reconstructed_solution: Optional[str] = None
        if "reconstructedSolution" in block:
            reconstructed_solution = self.validate_string_param(
                block["reconstructedSolution"], "firstPrinciples.reconstructedSolution"
            )

        return FirstPrinciples(
            reasoning_from_zero=reasoning_from_zero,
            reconstructed_solution=reconstructed_solution,
            **lists,
        )


def _snake_case(name: str) -> str:
    return "".join("_" + c.lower() if c.isupper() else c for c in name)
