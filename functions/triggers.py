from firebase_functions import firestore_fn, scheduler_fn
from messages.cleanup_expired import run_scheduled_cleanup
from messages.on_delivered import on_message_delivered
from models.constants import EXPIRY_SWEEP_SCHEDULE, MESSAGE_DOCUMENT_PATH


# Scheduled job that deletes expired messages
@scheduler_fn.on_schedule(schedule=EXPIRY_SWEEP_SCHEDULE)
def cleanup_expired_messages_job(event: scheduler_fn.ScheduledEvent) -> None:
    """
    Scheduled function that removes every message past its expiry time.

    Args:
        event: The scheduler event for this run

    Returns:
        None
    """
    return run_scheduled_cleanup()


# Firestore trigger for message updates
@firestore_fn.on_document_updated(document=MESSAGE_DOCUMENT_PATH)
def process_message_delivered(
    event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot | None]],
) -> None:
    """
    Firestore trigger function that runs when an incoming message is updated.

    Args:
        event: The Firestore event containing the before and after snapshots

    Returns:
        None
    """
    return on_message_delivered(event)
