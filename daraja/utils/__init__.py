"""
Utils Package
Utility functions and helpers
"""

from daraja.utils.logger import get_logger, configure_logging
from daraja.utils.validators import validate_amount, is_blank

__all__ = [
    'get_logger',
    'configure_logging',
    'validate_amount',
    'is_blank',
]
