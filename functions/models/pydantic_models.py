from typing import Optional

from pydantic import BaseModel, StrictBool


class MessageDocument(BaseModel):
    """
    The delivery state of an incoming message document.

    `delivered` is strict so that only a real boolean counts as a delivery
    state; anything else fails validation. Other fields are not validated.
    """

    delivered: Optional[StrictBool] = None

    class Config:
        extra = "ignore"
