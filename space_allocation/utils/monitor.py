import time
from collections import deque
from functools import wraps

from .logger import get_logger

class PerformanceMonitor:
    """Monitor system performance"""
    
    def __init__(self, max_records: int = 1000):
        self.max_records = max_records
        # bounded, thread-safe appends
        self.metrics = deque(maxlen=max_records)
    
    def time_it(self, func):
        """Decorator to time function execution"""
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            duration = time.perf_counter() - start
            self.metrics.append((func.__name__, duration))
            get_logger().debug(f"{func.__name__} took {duration * 1000:.2f}ms")
            return result
        return wrapper
    
    def reset(self):
        self.metrics.clear()

monitor = PerformanceMonitor()
