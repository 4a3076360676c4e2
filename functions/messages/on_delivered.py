import time
from typing import Callable, Optional

from firebase_functions import firestore_fn
from google.cloud.firestore import DocumentReference
from models.constants import DELIVERY_GRACE_SECONDS, MessageFields, MessageParams
from models.pydantic_models import MessageDocument
from pydantic import ValidationError
from utils.logging_utils import get_logger


def _parse_message(snapshot: Optional[firestore_fn.DocumentSnapshot]) -> Optional[MessageDocument]:
    if snapshot is None or not snapshot.exists:
        return None
    return MessageDocument.model_validate(snapshot.to_dict() or {})


def is_delivery_transition(
    before: Optional[firestore_fn.DocumentSnapshot],
    after: Optional[firestore_fn.DocumentSnapshot],
) -> bool:
    """
    Checks whether an update marks a message as delivered.

    Only an explicit `delivered: False` before the update and an explicit
    `delivered: True` after it counts. Missing snapshots, missing fields and
    non-boolean values do not.

    Args:
        before: The document snapshot before the update
        after: The document snapshot after the update

    Returns:
        True if the update flips delivered from false to true
    """
    logger = get_logger(__name__)

    try:
        before_message = _parse_message(before)
        after_message = _parse_message(after)
    except ValidationError as e:
        logger.warning(f"Ignoring update with malformed message data: {str(e)}")
        return False

    if before_message is None or after_message is None:
        return False

    return before_message.delivered is False and after_message.delivered is True


def reap_delivered_message(
    reference: DocumentReference,
    message_id: str,
    delay: float = DELIVERY_GRACE_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Waits for the grace period and then deletes a delivered message.

    The wait gives the recipient time to read the delivered state before the
    document goes away. Nothing is awaited from the client, so the invocation
    always lasts at least `delay` seconds.

    Args:
        reference: Reference to the message document
        message_id: The message ID, used for logging
        delay: Seconds to wait before deleting
        sleep: Blocking sleep function

    Returns:
        True if the message was deleted, False if the deletion failed
    """
    logger = get_logger(__name__)

    try:
        sleep(delay)
        reference.delete()
        logger.info(f"Deleted delivered message {message_id}")
        return True
    except Exception as e:
        logger.error(f"Error deleting delivered message {message_id}: {str(e)}", exc_info=True)
        return False


def on_message_delivered(event) -> None:
    """
    Firestore trigger function that runs when a message document is updated.

    Deletes the message after the grace period if the update marked it as
    delivered; every other update is ignored.

    Args:
        event: The Firestore event carrying the before and after snapshots

    Returns:
        None
    """
    logger = get_logger(__name__)

    message_id = event.params.get(MessageParams.MESSAGE_ID, "unknown")
    user_id = event.params.get(MessageParams.USER_ID, "unknown")

    change = event.data
    try:
        delivered = change is not None and is_delivery_transition(
            change.before, change.after
        )
    except Exception as e:
        logger.error(f"Error reading update for message {message_id}: {str(e)}", exc_info=True)
        return

    if not delivered:
        logger.info(
            f"Message {message_id} for user {user_id} updated without "
            f"a {MessageFields.DELIVERED} transition, skipping"
        )
        return

    logger.info(f"Message {message_id} for user {user_id} was delivered")
    reap_delivered_message(change.after.reference, message_id)
