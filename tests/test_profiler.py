"""Tests for performance profiler."""

import pytest
from json_normalizer.profiler import PerformanceProfiler


class TestPerformanceProfiler:
    """Tests for PerformanceProfiler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = PerformanceProfiler()

    def test_profile_operation(self):
        """Test that a profiled block records metrics."""
        with self.profiler.profile_operation("normalize_document", input_size=128) as profile:
            profile.output_size = 64
            profile.warnings_emitted = 2

        metrics = self.profiler.metrics_history[0]
        assert metrics.operation_name == "normalize_document"
        assert metrics.input_size == 128
        assert metrics.output_size == 64
        assert metrics.warnings_emitted == 2
        assert metrics.duration >= 0
        assert metrics.memory_start_mb > 0

    def test_metrics_recorded_on_error(self):
        """Test that metrics are recorded even when the block raises."""
        with pytest.raises(RuntimeError):
            with self.profiler.profile_operation("failing"):
                raise RuntimeError("boom")

        assert len(self.profiler.metrics_history) == 1
        assert self.profiler.current_operation is None

    def test_stop_without_start(self):
        """Test stopping without an active session."""
        with pytest.raises(ValueError, match="No active profiling session"):
            self.profiler.stop_profiling()

    def test_summary(self):
        """Test the summary of recorded operations."""
        assert self.profiler.get_summary() == {"operations": 0}

        for size in (10, 20):
            with self.profiler.profile_operation("op", input_size=size):
                pass

        summary = self.profiler.get_summary()
        assert summary["operations"] == 2
        assert summary["total_input_size"] == 30
