"""
Schemas Package
Marshmallow schemas for input validation
"""

from daraja.schemas.stk_schema import (
    CredentialsSchema,
    StkPushSchema
)

__all__ = [
    'CredentialsSchema',
    'StkPushSchema'
]
