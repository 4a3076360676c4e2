from datetime import datetime, timezone
from typing import Callable, Optional

from firebase_admin import firestore
from models.constants import Collections, MessageFields, QueryOperators
from models.data_models import SweepResult
from utils.firestore_utils import get_db
from utils.logging_utils import get_logger


def sweep_expired_messages(db: firestore.Client, now: datetime) -> SweepResult:
    """
    Deletes every incoming message whose expiry time is at or before `now`.

    Each user partition under the messages collection is queried in turn and
    its expired messages are deleted one by one. Deletions already applied
    are kept if a later one fails; the error propagates to the caller.

    Args:
        db: Firestore client
        now: The cutoff timestamp for this run

    Returns:
        A SweepResult with the number of partitions scanned and messages deleted
    """
    logger = get_logger(__name__)
    result = SweepResult()

    # list_documents also yields partitions that only exist through their
    # incoming subcollection
    for user_ref in db.collection(Collections.MESSAGES).list_documents():
        result.users_scanned += 1

        expired_messages = (
            user_ref.collection(Collections.INCOMING)
            .where(MessageFields.EXPIRES_AT, QueryOperators.LESS_THAN_OR_EQUAL, now)
            .stream()
        )

        for message_doc in expired_messages:
            message_doc.reference.delete()
            result.deleted_count += 1
            logger.info(f"Deleted expired message {message_doc.id} for user {user_ref.id}")

    return result


def cleanup_expired_messages(db: firestore.Client, now: Optional[datetime] = None) -> None:
    """
    Runs one expiry sweep and logs the outcome.

    Failures are logged and swallowed so that the scheduler always sees a
    completed run; anything missed is picked up by the next run.

    Args:
        db: Firestore client
        now: The cutoff timestamp, defaults to the current UTC time
    """
    logger = get_logger(__name__)

    if now is None:
        now = datetime.now(timezone.utc)

    logger.info(f"Sweeping messages that expired at or before {now.isoformat()}")

    try:
        result = sweep_expired_messages(db, now)

        if result.deleted_count > 0:
            logger.info(f"Deleted {result.deleted_count} expired messages")
        else:
            logger.info("No expired messages found")
        logger.info(f"Expiry sweep finished: {result.to_json()}")
    except Exception as e:
        logger.error(f"Error cleaning up expired messages: {str(e)}", exc_info=True)


def run_scheduled_cleanup(
    get_client: Callable[[], firestore.Client] = get_db,
) -> None:
    """
    Scheduled entry point: connects to Firestore and runs one cleanup.

    A failure to create the client is logged and swallowed like any other
    sweep failure.

    Args:
        get_client: Returns the Firestore client to sweep
    """
    logger = get_logger(__name__)

    try:
        db = get_client()
    except Exception as e:
        logger.error(f"Error connecting to Firestore for expiry sweep: {str(e)}", exc_info=True)
        return

    cleanup_expired_messages(db)
