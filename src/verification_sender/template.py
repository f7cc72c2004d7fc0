from typing import Any, Optional

SUBJECT = "Confirm your FaceTune Beauty account"
DEFAULT_CONFIRM_URL = "https://your-domain.com/confirm"

def resolve_confirm_link(confirm_url: Optional[Any]) -> Any:
    """Only a missing link falls back to the default; an empty string is kept."""
    return DEFAULT_CONFIRM_URL if confirm_url is None else confirm_url

def build_confirmation_html(confirm_link: Any) -> str:
    """
    Build the confirmation email body.
    The link goes into the call-to-action href as given; the rest is static.
    """
    return f"""
          <div style="font-family:Arial,sans-serif;background:#f6f7fb;padding:24px;">
            <div style="max-width:620px;margin:0 auto;background:#ffffff;border-radius:16px;padding:32px;box-shadow:0 8px 30px rgba(0,0,0,0.08);">
              <div style="text-align:center;">
                <div style="display:inline-block;background:#ffe6f0;color:#ff4d97;padding:8px 14px;border-radius:999px;font-size:12px;font-weight:600;letter-spacing:0.4px;">
                  FACETUNE BEAUTY
                </div>
                <h1 style="margin:16px 0 8px 0;font-size:26px;color:#1f2937;">Confirm your account</h1>
                <p style="margin:0 0 24px 0;color:#6b7280;font-size:15px;">
                  Tap the button below to confirm your FaceTune Beauty account and start exploring your personalized looks.
                </p>
                <a href="{confirm_link}" style="display:inline-block;background:#ff4d97;color:#ffffff;text-decoration:none;font-weight:600;padding:14px 28px;border-radius:10px;box-shadow:0 8px 20px rgba(255,77,151,0.3);">
                  Confirm my account
                </a>
                <p style="margin:24px 0 0 0;color:#9ca3af;font-size:12px;">
                  If you didn’t create this account, you can safely ignore this email.
                </p>
              </div>
              <div style="margin-top:28px;border-top:1px solid #f0f1f5;padding-top:16px;color:#9ca3af;font-size:12px;text-align:center;">
                Need help? Reply to this email or visit our support page.
              </div>
            </div>
          </div>
        """
