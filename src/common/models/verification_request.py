from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

class VerificationRequest(BaseModel):
    """
    Inbound payload: {"email": "...", "confirmUrl": "..."}

    Values are kept as sent; callers decide what counts as missing.
    """
    model_config = ConfigDict(extra="ignore")

    email: Any = None
    confirmUrl: Optional[Any] = None
