"""
Service layer for grid generation.

Cross-cutting concerns shared by every grid: the mutation channel with
its listener registry, and the diagnostic sinks for isolated failures.
"""

from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    LoggingDiagnosticSink,
    CollectingDiagnosticSink,
)
from .mutation_channel import FieldChangeEvent, ListenerRegistry, MutationChannel

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "CollectingDiagnosticSink",
    "FieldChangeEvent",
    "ListenerRegistry",
    "MutationChannel",
]
