"""Bearer tokens for admin calls from a Google service account.

Browser callers authenticate with their own Firebase ID token and pass it per
call. Scripts and back-office jobs use a service account instead; this module
turns one into a TokenProvider for FirestoreRESTClient. Token caching and
refresh are done by google-auth's Credentials object, not by the client.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from folio.core.config import Settings

logger = logging.getLogger(__name__)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def load_service_account_key(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path, or None if neither is set."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


class ServiceAccountTokenProvider:
    """Async callable returning an OAuth access token for the service account."""

    def __init__(self, credentials) -> None:
        self._credentials = credentials

    @classmethod
    def from_key_dict(cls, key_dict: dict) -> ServiceAccountTokenProvider:
        return cls(_get_credentials(key_dict))

    async def __call__(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)
