"""
Daraja API client

Wraps the two calls needed to collect money with Lipa na M-Pesa Online:

Authentication
    GET  /oauth/v1/generate?grant_type=client_credentials  (Basic auth)
    Tokens are cached per client and refreshed on expiry.

STK Push
    POST /mpesa/stkpush/v1/processrequest  (Bearer token)
    The customer confirms on their phone; Safaricom reports the outcome to
    CallBackURL. Receiving that callback is up to the caller.
"""

import time
from dataclasses import fields
from typing import Any, Callable, Dict, Optional, Tuple

import httpx
from marshmallow import ValidationError as SchemaValidationError

from daraja.config import get_config
from daraja.errors import AuthenticationError, RequestError, ValidationError
from daraja.models import Credentials, TransactionRequest, DEFAULT_TRANSACTION_TYPE
from daraja.schemas import CredentialsSchema, StkPushSchema
from daraja.services.base import handle_response
from daraja.services.stk_service import sign_stk_payload
from daraja.services.token_service import TokenCache
from daraja.utils.logger import get_logger
from daraja.utils.validators import is_blank

logger = get_logger(__name__)


def _first_error(
    schema, data: Dict[str, Any], order
) -> Optional[Tuple[str, str, Dict[str, Any]]]:
    """
    Return (field, detail, messages) for the first invalid field in declared
    order, or None when data is valid. messages is the full marshmallow error
    dict.
    """
    try:
        schema.load(data)
    except SchemaValidationError as err:
        messages = err.messages if isinstance(err.messages, dict) else {}
        for name in order:
            if name in messages:
                detail = messages[name]
                if isinstance(detail, list):
                    detail = "; ".join(str(m) for m in detail)
                return name, str(detail), messages
        return next(iter(messages), "unknown"), str(err), messages
    return None


class DarajaClient:
    """M-Pesa (Daraja API) STK Push client."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        business_shortcode: str,
        passkey: str,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        token_cache: Optional[TokenCache] = None,
        transaction_type: str = DEFAULT_TRANSACTION_TYPE.value,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            consumer_key: App consumer key from the Safaricom developer portal
            consumer_secret: App consumer secret
            business_shortcode: PayBill or till number
            passkey: Lipa na M-Pesa Online passkey
            environment: 'sandbox' (default), 'production' or 'testing'
            base_url: Overrides the environment base URL, e.g. for a proxy
            http_client: Shared httpx.AsyncClient. When omitted the client
                creates and owns one.
            token_cache: Pre-built TokenCache, e.g. to share tokens between
                clients using the same credentials
            transaction_type: CustomerPayBillOnline or CustomerBuyGoodsOnline
            clock: Time source for token expiry, in seconds

        Raises:
            ValidationError: If any credential is missing
            ValueError: If the environment is unknown
        """
        # Shortcodes are often configured as numbers
        if isinstance(business_shortcode, int) and not isinstance(business_shortcode, bool):
            business_shortcode = str(business_shortcode)

        self._validate_credentials({
            "consumer_key": consumer_key,
            "consumer_secret": consumer_secret,
            "business_shortcode": business_shortcode,
            "passkey": passkey,
        })

        self.credentials = Credentials(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            business_shortcode=business_shortcode,
            passkey=passkey,
        )
        self.config = get_config(environment)
        self.base_url = (base_url or self.config.BASE_URL).rstrip("/")
        self.transaction_type = transaction_type

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            headers={"Content-Type": "application/json"}
        )

        self.token_cache = token_cache or TokenCache(
            self._http,
            auth_url=f"{self.base_url}{self.config.AUTH_PATH}",
            timeout=self.config.AUTH_TIMEOUT,
            expiry_margin=self.config.TOKEN_EXPIRY_MARGIN,
            clock=clock,
        )

    @classmethod
    def from_credentials(cls, credentials: Credentials, **kwargs) -> "DarajaClient":
        return cls(**credentials.to_dict(), **kwargs)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    # Public API

    async def generate_token(self) -> str:
        """Return a valid access token, from cache when possible."""
        try:
            return await self.token_cache.get_token(self.credentials)
        except AuthenticationError as exc:
            raise AuthenticationError(
                f"Failed to generate token: {exc.message}",
                status_code=exc.status_code,
                response_data=exc.response_data,
            ) from exc

    async def initiate_stk_push(
        self,
        phone_number: str,
        amount,
        account_reference: str,
        callback_url: str,
    ) -> Any:
        """
        Initiate an STK Push transaction.

        Args:
            phone_number: Customer phone in international format, e.g. "254712345678"
            amount: Amount to charge; must be positive
            account_reference: Account / order reference shown on the customer's phone
            callback_url: Endpoint that receives the transaction result

        Returns:
            Daraja's JSON response, unmodified

        Raises:
            ValidationError: If a detail is missing or invalid (no network call made)
            AuthenticationError: If the token exchange fails
            RequestError: If the STK Push request fails
        """
        return await self.initiate(TransactionRequest(
            phone_number=phone_number,
            amount=amount,
            account_reference=account_reference,
            callback_url=callback_url,
        ))

    async def initiate(self, transaction: TransactionRequest) -> Any:
        """Initiate an STK Push for a prepared TransactionRequest."""
        self._validate_transaction(transaction)

        token = await self.token_cache.get_token(self.credentials)

        payload = sign_stk_payload(
            self.credentials,
            transaction,
            utc_offset_hours=self.config.TIMESTAMP_UTC_OFFSET_HOURS,
            transaction_type=self.transaction_type,
        )

        logger.info(
            "Initiating STK Push for account reference %s", transaction.account_reference
        )
        return await self._post(self.config.STK_PUSH_PATH, payload, token)

    # Private helpers

    async def _post(self, path: str, payload: Dict[str, Any], token: str) -> Any:
        """Execute an authenticated POST to a Daraja endpoint."""
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type":  "application/json",
        }
        url = f"{self.base_url}{path}"

        try:
            resp = await self._http.post(
                url, json=payload, headers=headers, timeout=self.config.REQUEST_TIMEOUT
            )
        except httpx.HTTPError as exc:
            logger.error("STK Push network error: %s", exc)
            raise RequestError(
                f"STK Push failed: {str(exc) or type(exc).__name__}"
            ) from exc

        try:
            return handle_response(resp, "stk_push", RequestError)
        except RequestError as exc:
            logger.error("STK Push rejected: %s", exc.message)
            raise RequestError(
                f"STK Push failed: {exc.message}",
                status_code=exc.status_code,
                response_data=exc.response_data,
            ) from exc

    @staticmethod
    def _validate_credentials(credentials: Dict[str, Any]) -> None:
        error = _first_error(CredentialsSchema(), credentials, list(credentials))
        if error:
            name, _, messages = error
            raise ValidationError(
                f"Missing required parameter: {name}", field=name, errors=messages
            )

    @staticmethod
    def _validate_transaction(transaction: TransactionRequest) -> None:
        order = [f.name for f in fields(transaction)]
        data = transaction.to_dict()
        error = _first_error(StkPushSchema(), data, order)
        if not error:
            return

        name, detail, messages = error
        if is_blank(data.get(name)):
            message = f"Missing required transaction detail: {name}"
        else:
            message = f"Invalid transaction detail: {name} ({detail})"
        raise ValidationError(message, field=name, errors=messages)
