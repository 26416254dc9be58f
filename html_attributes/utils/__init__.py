"""
Utility modules for the attribute engine.
"""

from html_attributes.utils.config import Config
from html_attributes.utils.logging import setup_logging, log_exception

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
]
