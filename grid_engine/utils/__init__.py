"""
Utility modules for the engine.
"""

from grid_engine.utils.config import Config
from grid_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
