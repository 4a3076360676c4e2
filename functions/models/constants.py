from enum import StrEnum

# Scheduler cadence for the expiry sweep
EXPIRY_SWEEP_SCHEDULE = "every 1 hours"

# Seconds to wait after delivery before the message is deleted
DELIVERY_GRACE_SECONDS = 2


# Collection names
class Collections(StrEnum):
    MESSAGES = "messages"
    INCOMING = "incoming"


# Field names for Message documents
class MessageFields(StrEnum):
    EXPIRES_AT = "expiresAt"
    DELIVERED = "delivered"


# Path parameters for the message document trigger
class MessageParams(StrEnum):
    USER_ID = "userId"
    MESSAGE_ID = "messageId"


class QueryOperators(StrEnum):
    LESS_THAN_OR_EQUAL = "<="


MESSAGE_DOCUMENT_PATH = (
    f"{Collections.MESSAGES}/{{{MessageParams.USER_ID}}}"
    f"/{Collections.INCOMING}/{{{MessageParams.MESSAGE_ID}}}"
)
