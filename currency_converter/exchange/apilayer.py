"""apilayer exchangerates_data provider implementation."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

import httpx

from currency_converter.catalog import Currency, from_code
from currency_converter.config import DEFAULT_EXCHANGE_TIMEOUT, DEFAULT_EXCHANGE_URL, try_load_config
from currency_converter.exchange.base import BaseExchangeClient, ConversionResult, Failed, Succeeded
from currency_converter.utils.decorators import log_execution
from currency_converter.utils.errors import (
    DecodeError,
    ExchangeClientError,
    RemoteRejectedError,
    TransportError,
    ValidationError,
)
from currency_converter.utils.logging import get_logger


logger = get_logger(__name__)


class ApiLayerClient(BaseExchangeClient):
    """
    Client for the apilayer ``exchangerates_data/convert`` endpoint.

    GET <base_url>?to=EUR&from=USD&amount=10&apikey=KEY
    Response: {"success": true, "query": {"from": "USD", "to": "EUR", "amount": 10}, "result": 9.2}
    """

    NAME = "apilayer"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        cfg = None
        if base_url is None or api_key is None or timeout is None:
            cfg = try_load_config()
        self.base_url: str = base_url or (cfg.exchange_base_url if cfg else DEFAULT_EXCHANGE_URL)
        self.api_key: str = api_key if api_key is not None else (cfg.exchange_api_key if cfg else "")
        if timeout is None:
            timeout = cfg.exchange_timeout if cfg else DEFAULT_EXCHANGE_TIMEOUT
        self.timeout: float = float(timeout)

    @log_execution(log_args=False, log_result=True)
    async def convert(self, from_code: str, to_code: str, amount: str) -> ConversionResult:
        try:
            data = await self._fetch(from_code, to_code, amount)
            return self._parse(data)
        except ExchangeClientError as e:
            logger.error(
                f"Conversion {from_code}->{to_code} failed: {e}",
                extra={"reason": e.reason.value},
            )
            return Failed(reason=e.reason, detail=str(e))

    async def _fetch(self, from_code: str, to_code: str, amount: str) -> Any:
        params = {"to": to_code, "from": from_code, "amount": amount, "apikey": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to exchange service failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            if resp.status_code >= 400:
                raise TransportError(f"HTTP {resp.status_code} from exchange service") from e
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        # An error status carrying the service envelope is still the service answering
        if resp.status_code >= 400 and not self._is_envelope(data):
            raise TransportError(f"HTTP {resp.status_code} from exchange service")
        return data

    @staticmethod
    def _is_envelope(data: Any) -> bool:
        return isinstance(data, dict) and isinstance(data.get("success"), bool)

    def _parse(self, data: Any) -> Succeeded:
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

        success = data.get("success")
        if not isinstance(success, bool):
            raise DecodeError("Response is missing the 'success' flag")

        if not success:
            raise RemoteRejectedError(self._error_message(data))

        query = data.get("query")
        if not isinstance(query, dict):
            raise DecodeError("Response is missing the 'query' echo")

        return Succeeded(
            requested_amount=self._number(query.get("amount"), "query.amount"),
            from_currency=self._currency(query.get("from"), "query.from"),
            to_currency=self._currency(query.get("to"), "query.to"),
            converted_amount=self._number(data.get("result"), "result"),
        )

    @staticmethod
    def _error_message(data: Dict[str, Any]) -> str:
        error_info = data.get("error")
        if isinstance(error_info, dict):
            return str(error_info.get("info") or error_info.get("message") or error_info.get("type") or "unknown error")
        if error_info:
            return str(error_info)
        return "Service reported success=false"

    @staticmethod
    def _number(value: Any, field_name: str) -> Decimal:
        # bool is an int subclass; "true" is not an amount
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise DecodeError(f"Field '{field_name}' is not a number: {value!r}")
        try:
            number = Decimal(str(value))
        except InvalidOperation as e:
            raise DecodeError(f"Field '{field_name}' is not a number: {value!r}") from e
        if not number.is_finite():
            raise DecodeError(f"Field '{field_name}' is not finite: {value!r}")
        return number

    @staticmethod
    def _currency(value: Any, field_name: str) -> Currency:
        if not isinstance(value, str):
            raise DecodeError(f"Field '{field_name}' is not a currency code: {value!r}")
        try:
            return from_code(value)
        except ValidationError as e:
            raise DecodeError(f"Field '{field_name}': {e}") from e
