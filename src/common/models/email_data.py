from pydantic import BaseModel, ConfigDict, Field
from typing import Any

class EmailData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    # Resend takes a single address or a list; forwarded as given
    to: Any
    subject: str
    html: str
