"""Performance monitoring utilities for pyqt-gridgen.

Times grid builds and logs the result to the performance logger named in
the grid configuration. Nothing is configured at import time; attach a
handler to that logger to see the timings.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from pyqt_gridgen.protocols import get_grid_config


def get_perf_logger() -> logging.Logger:
    return logging.getLogger(get_grid_config().performance_logger_name)


@dataclass
class Timing:
    """Measurement of one timed operation, filled in when the block exits."""
    operation_name: str
    context: Dict[str, Any] = field(default_factory=dict)
    elapsed_ms: Optional[float] = None

    def describe(self, with_context: bool) -> str:
        msg = f"{self.operation_name}: {self.elapsed_ms:.2f}ms"
        if with_context and self.context:
            msg += " (" + ", ".join(f"{k}={v}" for k, v in self.context.items()) + ")"
        return msg


@contextmanager
def timer(operation_name: str, threshold_ms: Optional[float] = None,
          log_args: bool = False, **kwargs) -> Iterator[Timing]:
    """Time the enclosed block and log it when it is slower than threshold_ms.

    Args:
        operation_name: Name of the operation being timed
        threshold_ms: Minimum duration worth logging; defaults to
            GridGenConfig.timing_threshold_ms
        log_args: Whether to include kwargs in the message
        **kwargs: Context of the operation, e.g. the bound object's type

    Example:
        with timer("Grid build", log_args=True, object_type="Connection") as timing:
            builder.refresh()
        timing.elapsed_ms
    """
    if threshold_ms is None:
        threshold_ms = get_grid_config().timing_threshold_ms
    timing = Timing(operation_name, dict(kwargs))
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing.elapsed_ms = (time.perf_counter() - start) * 1000
        if timing.elapsed_ms >= threshold_ms:
            get_perf_logger().debug(timing.describe(log_args))
