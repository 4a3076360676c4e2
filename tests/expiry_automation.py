#!/usr/bin/env python3
"""
Expiry Sweep Automation Script

This script runs the expiry sweep against the Firestore emulator:
- Create three users, each with two expired messages and one live message
- Run the sweep
- Check that the six expired messages are gone and the live ones remain
- Run the sweep again and check that nothing else is deleted
"""

import logging
import os
import sys
from datetime import datetime, timedelta, timezone

from emulator.messages_store import MessagesStore

# Make the functions source importable
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "functions")
)

from messages.cleanup_expired import sweep_expired_messages  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def run_expiry_test():
    """Run a test of the expiry sweep"""
    store = MessagesStore()
    store.clear()

    now = datetime.now(timezone.utc)
    users = ["expiry_user_1", "expiry_user_2", "expiry_user_3"]

    for user_id in users:
        store.add_message(user_id, "expired_1", now - timedelta(hours=2))
        store.add_message(user_id, "expired_2", now - timedelta(days=1), delivered=True)
        store.add_message(user_id, "live", now + timedelta(days=7))

    # First sweep removes the expired messages
    result = sweep_expired_messages(store.db, now)
    logger.info(f"First sweep result: {result.to_json()}")
    assert result.deleted_count == 6, f"Expected 6 deletions, got {result.deleted_count}"

    for user_id in users:
        assert not store.message_exists(user_id, "expired_1")
        assert not store.message_exists(user_id, "expired_2")
        assert store.message_exists(user_id, "live"), f"Live message of {user_id} was deleted"
    logger.info("Expired messages deleted and live messages kept")

    # Second sweep has nothing left to do
    result = sweep_expired_messages(store.db, now)
    logger.info(f"Second sweep result: {result.to_json()}")
    assert result.deleted_count == 0, f"Second sweep deleted {result.deleted_count} messages"

    logger.info("All expiry tests passed successfully!")


if __name__ == "__main__":
    try:
        run_expiry_test()
        logger.info("Expiry automation completed successfully!")
    except Exception as e:
        logger.error(f"Expiry automation failed: {str(e)}")
        raise
