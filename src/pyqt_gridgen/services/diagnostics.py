"""
Diagnostic sink for runtime failures the grid isolates.

A failing action button or change listener must not break the rest of
the grid, but the failure must not vanish either. Every isolated failure
is turned into a Diagnostic and reported to a sink; the default sink
logs it with its traceback.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    ACTION_FAILURE = "action_failure"      # Marked method raised when triggered
    LISTENER_FAILURE = "listener_failure"  # Change listener raised during notification


@dataclass(frozen=True)
class Diagnostic:
    """One isolated failure."""
    kind: DiagnosticKind
    member: Any
    error: BaseException
    message: str


class DiagnosticSink(ABC):
    """Receives isolated failures."""

    @abstractmethod
    def report(self, diagnostic: Diagnostic) -> None:
        pass


class LoggingDiagnosticSink(DiagnosticSink):
    """Logs every diagnostic at ERROR level, traceback included."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def report(self, diagnostic: Diagnostic) -> None:
        error = diagnostic.error
        self._log.error(f"[{diagnostic.kind.value}] {diagnostic.message}",
                        exc_info=(type(error), error, error.__traceback__))


class CollectingDiagnosticSink(LoggingDiagnosticSink):
    """Logs diagnostics and keeps them for later inspection."""

    def __init__(self, log: logging.Logger = logger):
        super().__init__(log)
        self.diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        super().report(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]

    def clear(self) -> None:
        self.diagnostics.clear()
