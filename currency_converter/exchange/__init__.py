"""Exchange client factory and exports."""

from .base import BaseExchangeClient, ConversionRequest, ConversionResult, Failed, Succeeded
from .apilayer import ApiLayerClient


def get_client(client_name: str = "apilayer") -> BaseExchangeClient:
    """Get an exchange client by canonical name ("apilayer")."""
    if client_name == ApiLayerClient.NAME:
        return ApiLayerClient()
    raise ValueError(f"Unknown exchange client: {client_name}")


__all__ = [
    "ApiLayerClient",
    "BaseExchangeClient",
    "ConversionRequest",
    "ConversionResult",
    "Failed",
    "Succeeded",
    "get_client",
]
