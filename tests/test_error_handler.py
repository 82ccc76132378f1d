import logging

import pytest

from space_allocation.utils.error_handler import ConfigurationError, SpaceAllocationError, handle_errors
from space_allocation.utils.logger import configure_logging, get_logger
from space_allocation.utils.monitor import PerformanceMonitor


def test_handle_errors_wraps_unexpected_exceptions():
    @handle_errors(raise_on_error=True)
    def broken():
        raise KeyError("missing")

    with pytest.raises(SpaceAllocationError, match="Unexpected error in broken"):
        broken()


def test_handle_errors_reraises_domain_errors():
    @handle_errors(raise_on_error=True)
    def misconfigured():
        raise ConfigurationError("bad thresholds")

    with pytest.raises(ConfigurationError):
        misconfigured()


def test_handle_errors_can_return_default():
    @handle_errors(default_return=[], raise_on_error=False)
    def broken():
        raise ValueError("boom")

    assert broken() == []


def test_monitor_records_durations():
    monitor = PerformanceMonitor(max_records=2)

    @monitor.time_it
    def work(value):
        return value * 2

    assert work(2) == 4
    work(3)
    work(4)
    assert [name for name, _ in monitor.metrics] == ["work", "work"]
    assert all(duration >= 0 for _, duration in monitor.metrics)

    monitor.reset()
    assert len(monitor.metrics) == 0
    work(5)
    assert monitor.metrics.maxlen == 2
    assert len(monitor.metrics) == 1


def test_logging_can_write_to_a_file(tmp_path):
    logger = configure_logging(log_dir=str(tmp_path), console_level="ERROR")
    try:
        logger.debug("shelf check")
        for handler in logger.handlers:
            handler.flush()
        log_files = list(tmp_path.glob("space_allocation_*.log"))
        assert len(log_files) == 1
        assert "shelf check" in log_files[0].read_text()
    finally:
        for handler in logger.handlers:
            handler.close()
        configure_logging()
    assert get_logger().name == "space_allocation"
    assert get_logger().level == logging.DEBUG
