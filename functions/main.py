# This file re-exports the functions from triggers.py
# to maintain compatibility with Firebase's expected structure

from firebase_admin import initialize_app

# Initialize the Admin SDK once, before any trigger runs
initialize_app()

# Import and re-export the scheduled and Firestore trigger functions
from triggers import cleanup_expired_messages_job as cleanup_expired_messages
from triggers import process_message_delivered as on_message_delivered

# These exports allow Firebase to find the functions under their deployed names
__all__ = ["cleanup_expired_messages", "on_message_delivered"]
