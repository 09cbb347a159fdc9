"""Performance profiler for normalize operations."""

import time
import psutil
import logging
from typing import Any, Dict, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for a normalize operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    warnings_emitted: int
    throughput_mbps: float


class PerformanceProfiler:
    """
    Profiler recording duration, memory use and throughput of operations.

    Metrics are logged at DEBUG level and kept in ``metrics_history``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0.0
        self.input_size = 0
        self.output_size = 0
        self.warnings_emitted = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        The caller may set ``output_size`` and ``warnings_emitted`` on the
        yielded profiler before the block ends.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0):
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
            input_size: Size of input data in bytes
        """
        self.current_operation = operation_name
        self.start_time = time.time()
        self.input_size = input_size
        self.output_size = 0
        self.warnings_emitted = 0
        self.start_memory = self._current_memory_mb()

        self.logger.debug(f"Started profiling: {operation_name}")

    def stop_profiling(self) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or not self.start_time:
            raise ValueError("No active profiling session")

        end_time = time.time()
        duration = end_time - self.start_time
        end_memory = self._current_memory_mb()
        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=self.output_size,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            warnings_emitted=self.warnings_emitted,
            throughput_mbps=throughput
        )
        self.metrics_history.append(metrics)

        self.logger.debug(
            f"Finished {metrics.operation_name} in {duration * 1000:.2f}ms: "
            f"{metrics.input_size}B in, {metrics.output_size}B out, "
            f"{metrics.warnings_emitted} warnings, "
            f"memory {metrics.memory_start_mb:.1f}MB -> {metrics.memory_end_mb:.1f}MB"
        )

        self.current_operation = None
        self.start_time = None
        return metrics

    def get_summary(self) -> Dict[str, Any]:
        """Summarize all recorded operations."""
        if not self.metrics_history:
            return {"operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        return {
            "operations": len(self.metrics_history),
            "total_duration": total_duration,
            "average_duration": total_duration / len(self.metrics_history),
            "total_input_size": sum(m.input_size for m in self.metrics_history),
            "total_output_size": sum(m.output_size for m in self.metrics_history),
            "peak_memory_mb": max(m.memory_end_mb for m in self.metrics_history),
        }

    def _current_memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0
