from daraja.models.constants import (
    TransactionType,
    GrantType,
    DEFAULT_TRANSACTION_TYPE,
    DEFAULT_TRANSACTION_DESC,
)
from daraja.models.credentials import Credentials
from daraja.models.transaction import TransactionRequest
from daraja.models.cached_token import CachedToken

__all__ = ['TransactionType', 'GrantType', 'DEFAULT_TRANSACTION_TYPE', 'DEFAULT_TRANSACTION_DESC',
           'Credentials', 'TransactionRequest', 'CachedToken']
