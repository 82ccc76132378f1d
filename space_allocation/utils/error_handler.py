from functools import wraps
from typing import Callable, Any

class SpaceAllocationError(Exception):
    """Base exception for the space allocation core"""
    pass

class ConfigurationError(SpaceAllocationError):
    """Invalid SpaceAllocationConfig"""
    pass

class ContractViolationError(SpaceAllocationError):
    """Caller passed input no reasonable caller should produce"""
    pass

class InvalidShelfError(ContractViolationError):
    """Shelf with negative or non-finite width"""
    pass

class RecordConversionError(SpaceAllocationError):
    """Error converting an external record into a model"""
    pass

def handle_errors(default_return=None, raise_on_error=True):
    """Decorator for error handling"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except SpaceAllocationError:
                if raise_on_error:
                    raise
                return default_return
            except Exception as e:
                if raise_on_error:
                    raise SpaceAllocationError(f"Unexpected error in {func.__name__}: {str(e)}") from e
                return default_return
        return wrapper
    return decorator
