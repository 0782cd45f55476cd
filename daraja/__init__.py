"""
Daraja
Async client for M-Pesa STK Push payments over the Safaricom Daraja API
"""

from daraja.client import DarajaClient
from daraja.config import Config, get_config
from daraja.errors import DarajaError, ValidationError, AuthenticationError, RequestError
from daraja.models import Credentials, TransactionRequest, TransactionType
from daraja.utils.logger import configure_logging
from daraja.services import TokenCache, generate_password, generate_timestamp, build_stk_payload

__all__ = [
    'DarajaClient',
    'Config',
    'get_config',
    'DarajaError',
    'ValidationError',
    'AuthenticationError',
    'RequestError',
    'Credentials',
    'TransactionRequest',
    'TransactionType',
    'TokenCache',
    'generate_password',
    'generate_timestamp',
    'build_stk_payload',
    'configure_logging',
]
