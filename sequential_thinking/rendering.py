"""
Display formatting for recorded thoughts.

format_thought() draws a bordered box around a thought header and its
content sections. Row widths are computed from the visible text only, so
turning ANSI colours on never changes the layout.
"""
from typing import List, Optional, Tuple

from .models import ThoughtRecord

# Confidence banding thresholds (lower bounds, inclusive)
VERY_HIGH_CONFIDENCE_THRESHOLD = 0.9
HIGH_CONFIDENCE_THRESHOLD = 0.8
MEDIUM_CONFIDENCE_THRESHOLD = 0.6
LOW_CONFIDENCE_THRESHOLD = 0.4

ANSI_RESET = "\033[0m"
ANSI_COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
}

EMPHASIS_COLORS = {
    "strong": "green",
    "neutral": "blue",
    "caution": "yellow",
    "alarm": "red",
}

OVERCONFIDENCE_WARNING = "⚠️ Overconfidence Pattern Detected"

# A rendered row is a sequence of (text, colour) segments
Segment = Tuple[str, Optional[str]]
Line = List[Segment]


def confidence_level_label(score: float) -> str:
    """Map a confidence score in [0, 1] to its band label."""
    if score >= VERY_HIGH_CONFIDENCE_THRESHOLD:
        return "Very High"
    if score >= HIGH_CONFIDENCE_THRESHOLD:
        return "High"
    if score >= MEDIUM_CONFIDENCE_THRESHOLD:
        return "Medium"
    if score >= LOW_CONFIDENCE_THRESHOLD:
        return "Low"
    return "Very Low"


def confidence_emphasis(score: float) -> str:
    """
    Map a confidence score to a display emphasis level.

    Returns one of "strong", "neutral", "caution" or "alarm". Used for
    presentation only.
    """
    if score >= HIGH_CONFIDENCE_THRESHOLD:
        return "strong"
    if score >= MEDIUM_CONFIDENCE_THRESHOLD:
        return "neutral"
    if score >= LOW_CONFIDENCE_THRESHOLD:
        return "caution"
    return "alarm"


def format_thought(record: ThoughtRecord, colorize: bool = False) -> str:
    """
    Render a thought as a bordered text block.

    Args:
        record: The validated thought
        colorize: Wrap labels in ANSI colour codes

    Returns:
        The block, one row per line, with no leading or trailing newline
    """
    header = _build_header(record)
    sections = _build_sections(record)

    width = max(_visible_length(line) for line in [header] + sections)
    border = "─" * (width + 2)

    rows = [f"┌{border}┐", _row(header, width, colorize), f"├{border}┤"]
    rows.extend(_row(line, width, colorize) for line in sections)
    rows.append(f"└{border}┘")
    return "\n".join(rows)


def _build_header(record: ThoughtRecord) -> Line:
    if record.is_revision:
        prefix: Segment = ("🔄 Revision", "yellow")
        context = f" (revising thought {_format_number(record.revises_thought)})"
    elif record.branch_from_thought:
        prefix = ("🌿 Branch", "green")
        context = (
            f" (from thought {_format_number(record.branch_from_thought)}, "
            f"ID: {_format_number(record.branch_id)})"
        )
    else:
        prefix = ("💭 Thought", "blue")
        context = ""

    position = f"{_format_number(record.thought_number)}/{_format_number(record.total_thoughts)}"
    header: Line = [prefix, (_single_line(f" {position}{context}"), None)]

    score = record.confidence_score
    if score is not None:
        label = f"[{confidence_level_label(score)}: {_format_percent(score)}]"
        header.append((" ", None))
        header.append((label, EMPHASIS_COLORS[confidence_emphasis(score)]))
    return header


def _build_sections(record: ThoughtRecord) -> List[Line]:
    sections = _section(record.thought)

    principles = record.first_principles
    if principles is not None:
        if principles.assumptions_identified:
            sections += _section(", ".join(principles.assumptions_identified),
                                 "❌ Assumptions Identified:", "red")
        if principles.fundamental_truths:
            sections += _section(", ".join(principles.fundamental_truths),
                                 "✓ Fundamental Truths:", "green")
        if principles.analogies_avoided:
            sections += _section(", ".join(principles.analogies_avoided),
                                 "🚫 Analogies Avoided:", "yellow")
        if principles.reconstructed_solution:
            sections += _section(principles.reconstructed_solution,
                                 "🔧 Reconstructed Solution:", "blue")
        if principles.evidence_base:
            sections += _section(", ".join(principles.evidence_base),
                                 "📚 Evidence Base:", "cyan")

    if record.confidence_reasoning:
        sections += _section(record.confidence_reasoning, "🎯 Confidence Reasoning:", "cyan")

    if record.uncertainty_factors:
        sections += _section(", ".join(record.uncertainty_factors), "⚠️ Uncertainty Factors:", "yellow")

    metrics = record.calibration_metrics
    if metrics is not None:
        items = []
        if metrics.previous_accuracy is not None:
            items.append(f"Previous Accuracy: {_format_percent(metrics.previous_accuracy)}")
        if metrics.uncertainty_awareness is not None:
            items.append(f"Uncertainty Awareness: {_format_percent(metrics.uncertainty_awareness)}")
        if metrics.overconfidence_pattern:
            items.append(OVERCONFIDENCE_WARNING)
        if items:
            sections += _section(", ".join(items), "📊 Calibration:", "magenta")

    return sections


def _section(text: str, label: Optional[str] = None, color: Optional[str] = None) -> List[Line]:
    """Split a section into rows; the label only leads the first one."""
    lines = []
    for index, part in enumerate(text.expandtabs(4).splitlines() or [""]):
        line: Line = []
        if label and index == 0:
            line += [(label, color), (" ", None)]
        line.append((part, None))
        lines.append(line)
    return lines


def _single_line(text: str) -> str:
    """Collapse line breaks so unchecked pointer values cannot split a row."""
    return " ".join(text.expandtabs(4).splitlines())


def _row(line: Line, width: int, colorize: bool) -> str:
    padding = " " * (width - _visible_length(line))
    return f"│ {_paint(line, colorize)}{padding} │"


def _paint(line: Line, colorize: bool) -> str:
    if not colorize:
        return "".join(text for text, _ in line)
    return "".join(
        f"{ANSI_COLORS[color]}{text}{ANSI_RESET}" if color else text
        for text, color in line
    )


def _visible_length(line: Line) -> int:
    return sum(len(text) for text, _ in line)


def _format_number(value) -> str:
    if value is None:
        return "?"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_percent(score: float) -> str:
    return f"{score * 100:.1f}%"
