from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class TransactionRequest:
    """Caller-supplied details of a single STK Push attempt"""
    phone_number: str
    amount: Union[int, float, Decimal]
    account_reference: str
    callback_url: str

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
