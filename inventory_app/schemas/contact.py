from pydantic import BaseModel
from typing import Any, Optional


class ContactRequest(BaseModel):
    """
    Contact form submission.

    Fields accept any JSON value and are only checked for presence by the
    contact service, so a missing field is reported as a 400 rather than as
    a schema error. Values are stringified when the entry is written.
    """
    name: Optional[Any] = None
    email: Optional[Any] = None
    message: Optional[Any] = None
    token: Optional[Any] = None


class ContactResponse(BaseModel):
    success: bool = True
