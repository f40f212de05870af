"""Response models shared by route modules."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Acknowledgement for operations with nothing else to return."""

    success: bool = True
    msg: str
