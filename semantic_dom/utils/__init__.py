"""
Utility modules for the converter.
"""

from semantic_dom.utils.config import Config
from semantic_dom.utils.logging import setup_logging, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'PerformanceLogger',
]
