from .error_handler import (
    SpaceAllocationError,
    ConfigurationError,
    ContractViolationError,
    InvalidShelfError,
    RecordConversionError,
    handle_errors,
)
from .logger import get_logger, configure_logging
from .monitor import monitor

__all__ = [
    'SpaceAllocationError', 'ConfigurationError', 'ContractViolationError',
    'InvalidShelfError', 'RecordConversionError', 'handle_errors',
    'get_logger', 'configure_logging', 'monitor',
]
