from typing import Optional

from firebase_admin import firestore
from utils.logging_utils import get_logger

_db: Optional[firestore.Client] = None


def get_db() -> firestore.Client:
    """
    Returns the process-wide Firestore client, creating it on first use.

    The Admin SDK app must already be initialized (see main.py). The client is
    reused by every invocation served by the same instance.
    """
    global _db
    if _db is None:
        get_logger(__name__).info("Creating Firestore client")
        _db = firestore.client()
    return _db


def reset_db() -> None:
    """Drops the cached client so the next get_db() call creates a new one."""
    global _db
    _db = None
