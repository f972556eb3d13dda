"""
Failure reporting for the README parser.

Public parser operations never raise. Any unexpected exception is wrapped in a
ParseFailure and handed to a diagnostic sink, and the operation returns its
safe default instead. Sinks are injected so callers (and tests) can decide
where failures go.
"""

import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, List, Protocol

logger = logging.getLogger(__name__)


class ParseFailure(Exception):
    """Unexpected error raised while segmenting, extracting, classifying or sanitizing."""

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class DiagnosticSink(Protocol):
    """Receives failures swallowed by the parser."""

    def report(self, failure: ParseFailure) -> None:
        ...


class LoggingDiagnosticSink:
    """Default sink: logs each failure as a warning."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def report(self, failure: ParseFailure) -> None:
        self.log.warning(f"Failed to {failure.operation}: {failure.cause!r}")


@dataclass
class FailureRecord:
    """A failure captured by CollectingDiagnosticSink."""
    timestamp: str
    operation: str
    error_type: str
    message: str


class CollectingDiagnosticSink:
    """Sink that keeps failures in memory for later inspection."""

    def __init__(self):
        self.records: List[FailureRecord] = []
        self.stats = {"failures": 0}

    def report(self, failure: ParseFailure) -> None:
        self.records.append(FailureRecord(
            timestamp=datetime.now().isoformat(),
            operation=failure.operation,
            error_type=type(failure.cause).__name__,
            message=str(failure.cause),
        ))
        self.stats["failures"] += 1

    def operations(self) -> List[str]:
        """Operations that failed, in report order."""
        return [record.operation for record in self.records]

    def to_dicts(self) -> List[Dict[str, str]]:
        return [asdict(record) for record in self.records]

    def get_stats(self) -> Dict[str, int]:
        """Get failure statistics."""
        return self.stats.copy()
