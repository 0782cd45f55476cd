from daraja.services.token_service import TokenCache
from daraja.services.stk_service import (
    generate_timestamp,
    generate_password,
    build_stk_payload,
    sign_stk_payload,
)

__all__ = [
    'TokenCache',
    'generate_timestamp',
    'generate_password',
    'build_stk_payload',
    'sign_stk_payload',
]
