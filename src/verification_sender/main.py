import requests
import argparse
from pathlib import Path
import json
import logging
from datetime import datetime
from typing import Any, Optional, Tuple
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from common.config import ResendSettings, load_resend_settings
from common.models.email_data import EmailData
from common.models.verification_request import VerificationRequest
from verification_sender.template import SUBJECT, build_confirmation_html, resolve_confirm_link

app = FastAPI(title="VERIFICATION_MAILER", version="1.0")

def get_timestamp() -> str:
    """
    Get current timestamp in a format suitable for filenames
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")

def get_log_filename(output_dir: Path) -> Path:
    """
    Generate timestamped filename for log file
    """
    timestamp = get_timestamp()
    return output_dir / f"verification_mailer_{timestamp}.log"

def setup_logging(log_file: Optional[Path] = None):
    """Configure the logging system; without a file, records go to stderr"""
    logging.basicConfig(
        filename=str(log_file) if log_file else None,
        level=logging.INFO,
        format='%(asctime)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

# Function to send email using Resend
def send_email(email_data: EmailData, settings: ResendSettings) -> requests.Response:
    headers = {
        "Authorization": f"Bearer {settings.api_key}",
        "Content-Type": "application/json"
    }
    return requests.post(settings.api_url, json=email_data.model_dump(by_alias=True), headers=headers)

def _parse_request(raw_body: bytes) -> VerificationRequest:
    payload = json.loads(raw_body)
    if payload is None:
        raise ValueError("Request body must not be null")
    # Any other JSON value that is not an object carries no fields
    if not isinstance(payload, dict):
        return VerificationRequest()
    return VerificationRequest.model_validate(payload)

def handle_request(raw_body: bytes) -> Tuple[int, Any]:
    """
    Handle one verification email request.

    Returns (status_code, payload):
      400 {"error": "Missing email"}          email absent or falsy
      500 {"error": "Missing RESEND_API_KEY"} credential not configured
      200 / 500 <Resend JSON>                 Resend answered 2xx / anything else
      500 {"error": "<exception>"}            anything raised along the way
    """
    try:
        request = _parse_request(raw_body)

        if not request.email:
            logging.warning("Rejected request without email")
            return 400, {"error": "Missing email"}

        settings = load_resend_settings()
        if not settings.has_api_key:
            logging.error("RESEND_API_KEY is not configured")
            return 500, {"error": "Missing RESEND_API_KEY"}

        confirm_link = resolve_confirm_link(request.confirmUrl)
        email_data = EmailData(
            from_=settings.mail_from,
            to=request.email,
            subject=SUBJECT,
            html=build_confirmation_html(confirm_link)
        )

        response = send_email(email_data, settings)
        data = response.json()

        if 200 <= response.status_code < 300:
            logging.info(f"✓ Email successfully sent to: {email_data.to}")
            logging.info(f"  Subject: {email_data.subject}")
            return 200, data

        logging.error(f"✗ Error sending email to {email_data.to}: HTTP {response.status_code}")
        return 500, data
    except Exception as e:
        logging.error(f"Error processing verification email request: {str(e)}")
        return 500, {"error": str(e)}

@app.get("/health")
def health():
    return {"ok": True}

@app.api_route(
    "/send-verification-email",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
)
async def send_verification_email(request: Request):
    raw_body = await request.body()
    # requests blocks, keep it off the event loop
    status_code, payload = await run_in_threadpool(handle_request, raw_body)
    return JSONResponse(status_code=status_code, content=payload)

def main(host: str, port: int, output_dir: Optional[Path] = None):
    log_file = None
    if output_dir is not None:
        # Create output directory if it doesn't exist
        output_dir.mkdir(parents=True, exist_ok=True)
        log_file = get_log_filename(output_dir)
        print(f"Server log will be written to: {log_file}")

    setup_logging(log_file)
    logging.info(f"Starting verification mailer on {host}:{port}")

    uvicorn.run(app, host=host, port=port)

def cli():
    parser = argparse.ArgumentParser(description='Serve the verification email endpoint backed by the Resend API.')
    parser.add_argument('--host', type=str, help='Address to bind', default='0.0.0.0')
    parser.add_argument('--port', type=int, help='Port to bind', default=8000)
    parser.add_argument('--output_dir', type=Path, help='Directory where log files will be saved')
    args = parser.parse_args()

    main(args.host, args.port, args.output_dir)

if __name__ == "__main__":
    cli()
