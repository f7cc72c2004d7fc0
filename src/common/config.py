from dotenv import load_dotenv
import os
from pydantic import BaseModel
from typing import Optional

# Load environment variables
load_dotenv()

DEFAULT_MAIL_FROM = "FaceTune Beauty <noreply@your-domain.com>"
DEFAULT_RESEND_API_URL = "https://api.resend.com/emails"

class ResendSettings(BaseModel):
    api_key: Optional[str] = None
    mail_from: str = DEFAULT_MAIL_FROM
    api_url: str = DEFAULT_RESEND_API_URL

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

def load_resend_settings() -> ResendSettings:
    """
    Read the Resend configuration from the environment.
    Called per request so changes to the environment are picked up without a restart.
    """
    return ResendSettings(
        api_key=os.getenv('RESEND_API_KEY'),
        mail_from=os.getenv('RESEND_FROM', DEFAULT_MAIL_FROM),
        api_url=os.getenv('RESEND_API_URL', DEFAULT_RESEND_API_URL),
    )
