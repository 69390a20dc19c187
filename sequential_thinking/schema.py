"""
Static metadata for the sequentialthinking tool: name, description and
JSON-schema parameter declaration shown to the host at listing time.
"""

TOOL_NAME = "sequentialthinking"

REQUIRED_PARAMETERS = ["thought", "nextThoughtNeeded", "thoughtNumber", "totalThoughts"]

TOOL_DESCRIPTION = """Step-by-step problem solving with first principles analysis and confidence calibration.
Each call records one thought. Thoughts can revise earlier ones, branch into alternatives, challenge assumptions and carry an explicit confidence estimate.

When to use this tool:
- Breaking a complex problem into steps
- Planning and design that may need revision
- Analysis where the full scope is not clear yet
- Tasks that need context kept over several steps
- Problems where uncertainty should be stated and tracked
- Questioning conventions and rebuilding a solution from fundamentals

Key features:
- totalThoughts can be adjusted up or down as you go
- Earlier thoughts can be questioned or revised
- More thoughts can be added after an apparent end
- Thoughts can branch or backtrack instead of building linearly
- Confidence scores with explicit reasoning and uncertainty factors
- Calibration metrics to track how accurate past confidence was
- First principles decomposition: assumptions, fundamental truths, evidence

Parameters:
- thought: The current thinking step (analysis, revision, question, hypothesis, verification)
- nextThoughtNeeded: True if more thinking is needed, even at what seemed like the end
- thoughtNumber: Position in the sequence (may go beyond the initial total)
- totalThoughts: Current estimate of thoughts needed
- isRevision: Whether this thought revises earlier thinking
- revisesThought: Which thought number is being reconsidered
- branchFromThought: Thought number this branch starts from
- branchId: Identifier of the current branch
- needsMoreThoughts: Set when reaching the end but more thoughts are needed
- confidenceScore: Confidence in this thought, 0.0 to 1.0
  * 0.9-1.0 Very High: strong evidence, clear reasoning
  * 0.8-0.89 High: good evidence, minor uncertainties
  * 0.6-0.79 Medium: some evidence, notable uncertainties
  * 0.4-0.59 Low: limited evidence, significant doubts
  * 0.0-0.39 Very Low: speculative reasoning
- confidenceReasoning: Why this confidence level was chosen
- uncertaintyFactors: Specific sources of doubt (e.g. "incomplete information")
- calibrationMetrics: previousAccuracy (0.0-1.0), overconfidencePattern (boolean), uncertaintyAwareness (0.0-1.0)
- firstPrinciples: assumptionsIdentified, assumptionsChallenged, fundamentalTruths, analogiesAvoided, evidenceBase (string arrays), reasoningFromZero (boolean), reconstructedSolution (string)

You should:
1. Start with an estimate of the thoughts needed and adjust it freely
2. Mark thoughts that revise earlier thinking or branch into new paths
3. State uncertainty with confidenceScore and confidenceReasoning
4. Identify and challenge assumptions, and build from fundamental truths
5. Generate a solution hypothesis and verify it against the earlier steps
6. Only set nextThoughtNeeded to false when a satisfactory answer is reached"""


def _string_array(description):
    return {"type": "array", "items": {"type": "string"}, "description": description}


def _unit_interval(description):
    return {"type": "number", "description": description, "minimum": 0.0, "maximum": 1.0}


INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "thought": {
            "type": "string",
            "description": "Your current thinking step"
        },
        "nextThoughtNeeded": {
            "type": "boolean",
            "description": "Whether another thought step is needed"
        },
        "thoughtNumber": {
            "type": "integer",
            "description": "Current thought number (numeric value, e.g., 1, 2, 3)",
            "minimum": 1
        },
        "totalThoughts": {
            "type": "integer",
            "description": "Estimated total thoughts needed (numeric value, e.g., 5, 10)",
            "minimum": 1
        },
        "isRevision": {
            "type": "boolean",
            "description": "Whether this revises previous thinking"
        },
        "revisesThought": {
            "type": "integer",
            "description": "Which thought is being reconsidered",
            "minimum": 1
        },
        "branchFromThought": {
            "type": "integer",
            "description": "Branching point thought number",
            "minimum": 1
        },
        "branchId": {
            "type": "string",
            "description": "Branch identifier"
        },
        "needsMoreThoughts": {
            "type": "boolean",
            "description": "If more thoughts are needed"
        },
        "confidenceScore": _unit_interval("Confidence level for this thought (0.0 to 1.0)"),
        "confidenceReasoning": {
            "type": "string",
            "description": "Reasoning for the confidence level assigned"
        },
        "uncertaintyFactors": _string_array(
            "Specific factors contributing to uncertainty (e.g., incomplete information)"
        ),
        "calibrationMetrics": {
            "type": "object",
            "properties": {
                "previousAccuracy": _unit_interval(
                    "Accuracy of previous confidence predictions (0.0-1.0)"
                ),
                "overconfidencePattern": {
                    "type": "boolean",
                    "description": "Flag indicating a systematic overconfidence pattern"
                },
                "uncertaintyAwareness": _unit_interval(
                    "How well uncertainty is being recognized (0.0-1.0)"
                ),
            },
            "description": "Optional metrics for tracking confidence accuracy"
        },
        "firstPrinciples": {
            "type": "object",
            "properties": {
                "assumptionsIdentified": _string_array("Assumptions to be challenged"),
                "assumptionsChallenged": _string_array("Assumptions that were examined and questioned"),
                "fundamentalTruths": _string_array("Core facts that cannot be reduced further"),
                "reasoningFromZero": {
                    "type": "boolean",
                    "description": "Whether the reasoning is built from fundamentals rather than analogy"
                },
                "analogiesAvoided": _string_array("Conventions deliberately not followed"),
                "reconstructedSolution": {
                    "type": "string",
                    "description": "Solution built up from the fundamental truths"
                },
                "evidenceBase": _string_array("Factual evidence supporting the reasoning"),
            },
            "description": "First principles analysis for this thought"
        }
    },
    "required": REQUIRED_PARAMETERS
}

SEQUENTIAL_THINKING_TOOL = {
    "name": TOOL_NAME,
    "description": TOOL_DESCRIPTION,
    "inputSchema": INPUT_SCHEMA,
}
