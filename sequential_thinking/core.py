"""
Sequential Thinking Tool - Core Implementation
"""
from typing import Dict, List, Optional, Any, Callable, Tuple
from dataclasses import dataclass
import json
import logging
import threading

from .config import ServerConfig
from .models import ThoughtRecord
from .rendering import confidence_level_label, format_thought
from .schema import TOOL_NAME
from .validators import ThoughtValidationError, ThoughtValidator

# Logger that receives each rendered thought block
THOUGHT_LOGGER_NAME = "sequential_thinking.thoughts"

logger = logging.getLogger(__name__)


class ThoughtSession:
    """
    Accumulated thought history plus named branch buckets for one process.

    A record carrying both branchFromThought and branchId is stored in the
    history and in its branch bucket; branches are views over history, not
    separate storage.

    Nothing is ever evicted: history grows for the lifetime of the session
    with no capacity bound. Long-running hosts should start a new session
    (a new process) when memory matters.

    Thread-safe: appends and reads are guarded by a single lock.
    """

    def __init__(self):
        self._history: List[ThoughtRecord] = []
        self._branches: Dict[str, List[ThoughtRecord]] = {}
        self._lock = threading.RLock()

    def append(self, record: ThoughtRecord) -> None:
        """Add a record to the tail of the history."""
        with self._lock:
            self._history.append(record)

    def append_to_branch(self, branch_id: str, record: ThoughtRecord) -> None:
        """Add a record to a branch bucket, creating the bucket on first use."""
        with self._lock:
            self._branches.setdefault(branch_id, []).append(record)

    def record(self, record: ThoughtRecord) -> Tuple[int, List[str]]:
        """
        Store a record in the history and, when it starts a branch, in its bucket.

        Both appends happen inside one critical section so concurrent callers
        never interleave them.

        Args:
            record: A validated thought

        Returns:
            (history length, branch ids) as observed right after the append
        """
        with self._lock:
            self.append(record)
            if record.starts_branch:
                self.append_to_branch(str(record.branch_id), record)
            return len(self._history), list(self._branches)

    def history_length(self) -> int:
        with self._lock:
            return len(self._history)

    def branch_ids(self) -> List[str]:
        """Branch identifiers in the order they were first used."""
        with self._lock:
            return list(self._branches)

    def history(self) -> List[ThoughtRecord]:
        """Return a copy of the history."""
        with self._lock:
            return list(self._history)

    def branch(self, branch_id: str) -> List[ThoughtRecord]:
        """Return a copy of one branch bucket (empty if the branch is unknown)."""
        with self._lock:
            return list(self._branches.get(branch_id, []))


def build_success_envelope(record: ThoughtRecord, branch_ids: List[str],
                           history_length: int) -> Dict[str, Any]:
    """
    Build the status envelope for a recorded thought.

    The five base keys are always present. Derived keys only appear when the
    field they summarise was supplied.
    """
    envelope: Dict[str, Any] = {
        "thoughtNumber": record.thought_number,
        "totalThoughts": record.total_thoughts,
        "nextThoughtNeeded": record.next_thought_needed,
        "branches": branch_ids,
        "thoughtHistoryLength": history_length,
    }

    if record.confidence_score is not None:
        envelope["confidenceScore"] = record.confidence_score
        envelope["confidenceLevel"] = confidence_level_label(record.confidence_score)

    if record.uncertainty_factors is not None:
        envelope["uncertaintyCount"] = len(record.uncertainty_factors)

    if record.calibration_metrics is not None:
        envelope["calibrationData"] = record.calibration_metrics.submitted()

    principles = record.first_principles
    if principles is not None:
        envelope["firstPrinciplesApplied"] = {
            "assumptionsCount": len(principles.assumptions_identified or []),
            "truthsCount": len(principles.fundamental_truths or []),
            "reasoningFromZero": principles.reasoning_from_zero or False,
        }

    return envelope


def build_error_envelope(message: str) -> Dict[str, Any]:
    return {"error": message, "status": "failed"}


@dataclass
class ProcessResult:
    """Outcome of one tool call: the envelope and whether it reports a failure."""
    envelope: Dict[str, Any]
    is_error: bool = False

    @classmethod
    def failure(cls, message: str) -> "ProcessResult":
        return cls(envelope=build_error_envelope(message), is_error=True)

    @property
    def text(self) -> str:
        """The envelope serialized as indented JSON."""
        return json.dumps(self.envelope, indent=2, ensure_ascii=False, default=str)


class ThoughtProcessor:
    """
    Request processor for the sequential thinking tool.

    Validates each payload, records it in the session, optionally logs a
    rendered copy and returns the status envelope. process_thought() never
    raises.
    """

    def __init__(self, session: ThoughtSession, config: Optional[ServerConfig] = None,
                 validator: Optional[ThoughtValidator] = None,
                 thought_logger: Optional[logging.Logger] = None):
        self.session = session
        self.config = config or ServerConfig()
        self.validator = validator or ThoughtValidator()
        self.thought_logger = thought_logger or logging.getLogger(THOUGHT_LOGGER_NAME)

    def process_thought(self, payload: Any) -> ProcessResult:
        """
        Process one tool call.

        Validation failures leave the session untouched. A failure after the
        record has been stored (for instance while rendering) is reported as
        an error but the record stays in the history.

        Args:
            payload: Decoded tool arguments

        Returns:
            ProcessResult holding a success or error envelope
        """
        try:
            record = self.validator.validate(payload)

            if record.thought_number > record.total_thoughts:
                record.total_thoughts = record.thought_number

            history_length, branch_ids = self.session.record(record)

            if not self.config.disable_thought_logging:
                self.thought_logger.info(format_thought(record, colorize=self.config.colorize))

            return ProcessResult(build_success_envelope(record, branch_ids, history_length))

        except ThoughtValidationError as e:
            return ProcessResult.failure(str(e))
        except Exception as e:
            logger.error(f"Failed to process thought: {type(e).__name__}: {str(e)}", exc_info=True)
            return ProcessResult.failure(str(e) or type(e).__name__)


def create_sequential_thinking_handler(processor: ThoughtProcessor) -> Callable[..., str]:
    """
    Create a sequentialthinking handler bound to a processor.

    Args:
        processor: Processor holding the session to record into

    Returns:
        Handler taking the tool arguments as keywords and returning the
        envelope as JSON text
    """
    def handler(**kwargs) -> str:
        return processor.process_thought(kwargs).text
    return handler


def create_handlers(processor: Optional[ThoughtProcessor] = None) -> Dict[str, Callable[..., str]]:
    """
    Create the tool-name to handler mapping.

    Args:
        processor: Processor to bind. If None, a new one is built around a
            fresh session.

    Returns:
        {"sequentialthinking": handler}
    """
    processor = processor or ThoughtProcessor(ThoughtSession())
    return {TOOL_NAME: create_sequential_thinking_handler(processor)}
