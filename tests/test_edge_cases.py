"""
Edge case and error handling tests for boundary conditions.

Tests cover:
- Unusual but accepted inputs
- Malformed payload shapes
- Branch key normalization
- Non-integral positions
- Unicode and very long text in rendering and JSON output
"""
import pytest
import json
from sequential_thinking.config import ServerConfig
from sequential_thinking.core import ThoughtProcessor, ThoughtSession
from sequential_thinking.rendering import format_thought
from sequential_thinking.validators import ThoughtValidator


def thought(number=1, total=3, **extra):
    payload = {
        "thought": "Edge case thought",
        "thoughtNumber": number,
        "totalThoughts": total,
        "nextThoughtNeeded": True,
    }
    payload.update(extra)
    return payload


@pytest.mark.edge_case
class TestAcceptedInputs:
    """Inputs that look odd but are valid."""

    def setup_method(self):
        self.session = ThoughtSession()
        self.processor = ThoughtProcessor(
            self.session, config=ServerConfig(disable_thought_logging=True)
        )

    def test_whitespace_only_thought(self):
        result = self.processor.process_thought(thought(thought="   "))
        assert result.is_error is False

    def test_extra_keys_ignored(self):
        result = self.processor.process_thought(thought(mood="curious", stepTag=[1, 2]))
        assert result.is_error is False
        assert "mood" not in result.envelope

    def test_negative_positions(self):
        result = self.processor.process_thought(thought(-2, -5))
        assert result.envelope["thoughtNumber"] == -2
        assert result.envelope["totalThoughts"] == -2

    def test_fractional_number_raises_total(self):
        result = self.processor.process_thought(thought(2.5, 2))
        assert result.envelope["totalThoughts"] == 2.5

    def test_equal_number_and_total_unchanged(self):
        result = self.processor.process_thought(thought(3, 3))
        assert result.envelope["totalThoughts"] == 3

    def test_next_thought_false_does_not_close_session(self):
        self.processor.process_thought(thought(1, 1, nextThoughtNeeded=False))
        result = self.processor.process_thought(thought(2, 2))
        assert result.envelope["thoughtHistoryLength"] == 2

    def test_revision_without_target(self):
        result = self.processor.process_thought(thought(isRevision=True))
        assert result.is_error is False
        block = format_thought(self.session.history()[0])
        assert "(revising thought ?)" in block

    def test_confidence_zero_is_present(self):
        result = self.processor.process_thought(thought(confidenceScore=0))
        assert result.envelope["confidenceScore"] == 0
        assert result.envelope["confidenceLevel"] == "Very Low"


@pytest.mark.edge_case
class TestBranchKeys:
    """Branch identifiers are stored as strings."""

    def setup_method(self):
        self.session = ThoughtSession()
        self.processor = ThoughtProcessor(
            self.session, config=ServerConfig(disable_thought_logging=True)
        )

    def test_integer_branch_id(self):
        result = self.processor.process_thought(thought(branchFromThought=1, branchId=7))
        assert result.envelope["branches"] == ["7"]
        assert len(self.session.branch("7")) == 1

    def test_integer_and_string_ids_share_bucket(self):
        self.processor.process_thought(thought(branchFromThought=1, branchId=7))
        result = self.processor.process_thought(thought(2, branchFromThought=1, branchId="7"))
        assert result.envelope["branches"] == ["7"]
        assert len(self.session.branch("7")) == 2

    @pytest.mark.parametrize("extra", [
        {"branchFromThought": 0, "branchId": "A"},
        {"branchFromThought": 1, "branchId": ""},
        {"branchFromThought": None, "branchId": "A"},
    ])
    def test_falsy_branch_markers_create_no_branch(self, extra):
        result = self.processor.process_thought(thought(**extra))
        assert result.envelope["branches"] == []
        assert self.session.history_length() == 1


@pytest.mark.edge_case
class TestMalformedPayloads:
    """Payloads with the wrong overall shape."""

    def setup_method(self):
        self.processor = ThoughtProcessor(
            ThoughtSession(), config=ServerConfig(disable_thought_logging=True)
        )

    @pytest.mark.parametrize("payload", [None, [], "text", 3.14, {"thought": None}])
    def test_reported_as_missing_thought(self, payload):
        result = self.processor.process_thought(payload)
        assert result.envelope == {"error": "Invalid thought: must be a string", "status": "failed"}

    def test_null_optional_field_rejected(self):
        result = self.processor.process_thought(thought(confidenceReasoning=None))
        assert result.envelope["error"] == "Invalid confidenceReasoning: must be a string"

    def test_nested_null_rejected(self):
        result = self.processor.process_thought(
            thought(firstPrinciples={"reasoningFromZero": None})
        )
        assert result.envelope["error"] == "Invalid firstPrinciples.reasoningFromZero: must be a boolean"

    def test_infinite_confidence_rejected(self):
        result = self.processor.process_thought(thought(confidenceScore=float("inf")))
        assert result.is_error is True


@pytest.mark.edge_case
class TestTextHandling:
    """Unicode and size extremes."""

    def setup_method(self):
        self.validator = ThoughtValidator()

    def test_unicode_preserved_in_json(self):
        processor = ThoughtProcessor(ThoughtSession(), config=ServerConfig(disable_thought_logging=True))
        result = processor.process_thought(thought(branchFromThought=1, branchId="分支-β"))

        assert "分支-β" in result.text
        assert json.loads(result.text)["branches"] == ["分支-β"]

    def test_very_long_thought_renders(self):
        text = "word " * 2000
        block = format_thought(self.validator.validate(thought(thought=text)))
        lines = block.split("\n")
        assert len({len(line) for line in lines}) == 1

    def test_blank_lines(self):
        block = format_thought(self.validator.validate(thought(thought="a\n\nb")))
        lines = block.split("\n")
        assert len(lines) == 7
        assert len({len(line) for line in lines}) == 1

    def test_multiline_labelled_section(self):
        record = self.validator.validate(thought(confidenceReasoning="first\nsecond"))
        lines = format_thought(record).split("\n")
        assert "🎯 Confidence Reasoning: first" in lines[4]
        assert lines[5].startswith("│ second")
