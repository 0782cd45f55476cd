"""
STK Push signing and payload construction

Password = Base64(BusinessShortCode + Passkey + Timestamp)
Timestamp = YYYYMMDDHHmmss in East Africa Time (UTC+3), the zone Daraja
checks the timestamp against.
"""

import base64
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from daraja.models import (
    Credentials,
    TransactionRequest,
    DEFAULT_TRANSACTION_DESC,
    DEFAULT_TRANSACTION_TYPE,
)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def generate_timestamp(now: Optional[datetime] = None, utc_offset_hours: int = 3) -> str:
    """
    Current time as a 14-digit YYYYMMDDHHmmss string in a fixed UTC offset.

    Args:
        now: Aware datetime to format instead of the current time. Naive
            values are taken as UTC.
        utc_offset_hours: Offset of the zone Daraja expects (3 for Nairobi)
    """
    zone = timezone(timedelta(hours=utc_offset_hours))
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(zone).strftime(TIMESTAMP_FORMAT)


def generate_password(business_shortcode: str, passkey: str, timestamp: str) -> str:
    raw = f"{business_shortcode}{passkey}{timestamp}"
    return base64.b64encode(raw.encode("utf-8")).decode("utf-8")


def _json_amount(amount):
    # Decimal is not JSON serialisable; Daraja accepts whole numbers as ints
    if isinstance(amount, Decimal):
        return int(amount) if amount == amount.to_integral_value() else float(amount)
    return amount


def build_stk_payload(
    credentials: Credentials,
    password: str,
    timestamp: str,
    transaction: TransactionRequest,
    transaction_type: str = DEFAULT_TRANSACTION_TYPE.value,
    transaction_desc: str = DEFAULT_TRANSACTION_DESC,
) -> Dict[str, Any]:
    """
    Build the body of a Lipa na M-Pesa Online (STK Push) request.

    No validation happens here; the client validates before calling.
    """
    return {
        "BusinessShortCode": credentials.business_shortcode,
        "Password":          password,
        "Timestamp":         timestamp,
        "TransactionType":   transaction_type,
        "Amount":            _json_amount(transaction.amount),
        "PartyA":            transaction.phone_number,
        "PartyB":            credentials.business_shortcode,
        "PhoneNumber":       transaction.phone_number,
        "CallBackURL":       transaction.callback_url,
        "AccountReference":  transaction.account_reference,
        "TransactionDesc":   transaction_desc,
    }


def sign_stk_payload(
    credentials: Credentials,
    transaction: TransactionRequest,
    utc_offset_hours: int = 3,
    transaction_type: str = DEFAULT_TRANSACTION_TYPE.value,
) -> Dict[str, Any]:
    """Generate a fresh timestamp and password and build the payload with them."""
    timestamp = generate_timestamp(utc_offset_hours=utc_offset_hours)
    password = generate_password(credentials.business_shortcode, credentials.passkey, timestamp)
    return build_stk_payload(
        credentials, password, timestamp, transaction, transaction_type=transaction_type
    )
