"""Shared verification client built from settings."""

from xverify_client.config.settings import get_settings
from xverify_client.verification.client import VerificationClient

_client: VerificationClient | None = None


def get_verification_client() -> VerificationClient:
    """Get the shared client, creating it from settings on first use."""
    global _client
    if _client is not None:
        return _client

    settings = get_settings()
    if not settings.has_credentials:
        raise ValueError("XVERIFY_API_KEY and XVERIFY_DOMAIN must be set")

    _client = VerificationClient(
        api_key=settings.api_key,
        domain=settings.domain,
        config_options={"timeout": settings.timeout},
        base_uri=settings.base_uri,
    )
    return _client


def close_verification_client() -> None:
    """Close the shared client, if one was created."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
