"""Build Firestore REST clients from settings.

Each call returns a new client bound to an explicit StoreConfig, so several
configurations (e.g. tests against an emulator) can coexist in one process.
The caller owns the client and closes it with aclose() (or `async with`).
"""

import logging

from folio.core.config import Settings, get_settings
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient, StoreConfig
from folio.infrastructure.firebase.auth import (
    ServiceAccountTokenProvider,
    load_service_account_key,
)

logger = logging.getLogger(__name__)


def create_firestore_client(
    settings: Settings | None = None,
    *,
    use_service_account: bool = False,
) -> FirestoreRESTClient:
    """Return a client for the configured project.

    Args:
        settings: Settings to use; defaults to get_settings().
        use_service_account: Attach a ServiceAccountTokenProvider built from
            FIREBASE_SERVICE_ACCOUNT_KEY / FIREBASE_SERVICE_ACCOUNT_PATH so
            calls without an explicit token run as that account.

    Raises:
        ValueError: use_service_account is set but no service account key is configured.
    """
    settings = settings or get_settings()
    config = StoreConfig.from_settings(settings)
    token_provider = None
    if use_service_account:
        key_dict = load_service_account_key(settings)
        if not key_dict:
            raise ValueError(
                "Service account requested but FIREBASE_SERVICE_ACCOUNT_KEY / "
                "FIREBASE_SERVICE_ACCOUNT_PATH is not set"
            )
        token_provider = ServiceAccountTokenProvider.from_key_dict(key_dict)
        logger.info("Firestore client will authenticate as service account %s", key_dict.get("client_email", "?"))
    return FirestoreRESTClient(config, token_provider=token_provider)
