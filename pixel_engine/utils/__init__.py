"""
Utility modules for the rendering engine.
"""

from pixel_engine.utils.config import Config
from pixel_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
