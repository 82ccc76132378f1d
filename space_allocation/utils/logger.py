import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

class SpaceAllocationLogger:
    """Centralized logging for the space allocation core"""
    
    def __init__(self, log_dir: Optional[str] = None, console_level: str = "WARNING", file_level: str = "DEBUG"):
        # Create logger
        self.logger = logging.getLogger('space_allocation')
        self.logger.setLevel(logging.DEBUG)
        
        # Remove existing handlers
        self.logger.handlers = []
        
        # Console handler
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level))
        console_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_format)
        self.logger.addHandler(console_handler)
        
        # File handler only when the host application asks for one
        self.log_file = None
        if log_dir is not None:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            self.log_file = log_path / f"space_allocation_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(getattr(logging, file_level))
            file_format = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(module)-20s | %(funcName)-28s | %(message)s'
            )
            file_handler.setFormatter(file_format)
            self.logger.addHandler(file_handler)
            self.logger.info(f"Logging initialized. Log file: {self.log_file}")
    
    def get_logger(self):
        return self.logger

# Global logger instance
_logger_instance = None

def get_logger():
    """Get or create logger instance"""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = SpaceAllocationLogger()
    return _logger_instance.get_logger()

def configure_logging(log_dir: Optional[str] = None, console_level: str = "WARNING",
                      file_level: str = "DEBUG") -> logging.Logger:
    """Replace the logger instance, e.g. to add a log file or raise verbosity"""
    global _logger_instance
    _logger_instance = SpaceAllocationLogger(log_dir, console_level, file_level)
    return _logger_instance.get_logger()
