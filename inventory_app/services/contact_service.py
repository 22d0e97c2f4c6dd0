import logging
import re
from datetime import datetime, timezone

from inventory_app.schemas.contact import ContactRequest
from inventory_app.services.captcha import RecaptchaVerifier
from inventory_app.utils.message_log import MessageLog

logger = logging.getLogger(__name__)

UNSAFE_CHARACTERS = re.compile(r"[<>`\"'\\]")

ENTRY_SEPARATOR = "-" * 29


class ContactValidationError(Exception):
    """Exception raised when a required contact field is missing or empty."""

    def __init__(self, message: str = "Missing fields"):
        self.message = message
        super().__init__(self.message)


class CaptchaVerificationError(Exception):
    """Exception raised when the verification service rejects the token."""

    def __init__(self, message: str = "Captcha failed"):
        self.message = message
        super().__init__(self.message)


def clean(value) -> str:
    """Strip markup and quoting characters from a value and trim whitespace."""
    return UNSAFE_CHARACTERS.sub("", str(value)).strip()


def format_entry(name, email, message, submitted_at: datetime) -> str:
    """Render one submission as the plain-text block written to the log."""
    timestamp = submitted_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return (
        f"Name: {clean(name)}\n"
        f"Email: {clean(email)}\n"
        f"Message: {clean(message)}\n"
        f"Date: {timestamp}\n"
        f"{ENTRY_SEPARATOR}\n"
    )


class ContactService:
    """
    Contact form intake.

    A submission goes through three steps, stopping at the first failure:
    1. Every field (name, email, message, token) must be non-empty
    2. The token must be accepted by the reCAPTCHA service
    3. The sanitized submission is appended to the message log
    """

    REQUIRED_FIELDS = ("name", "email", "message", "token")

    def __init__(self, verifier: RecaptchaVerifier, message_log: MessageLog):
        self.verifier = verifier
        self.message_log = message_log

    def submit(self, contact: ContactRequest) -> None:
        """
        Validate, verify and record a contact submission.

        Raises:
            ContactValidationError: If a required field is missing or empty
            CaptchaVerificationError: If the token is rejected
            requests.RequestException: If the verification service is unreachable
            OSError: If the message log cannot be written
        """
        if not all(getattr(contact, field) for field in self.REQUIRED_FIELDS):
            raise ContactValidationError()

        if not self.verifier.verify(contact.token):
            raise CaptchaVerificationError()

        entry = format_entry(
            contact.name,
            contact.email,
            contact.message,
            datetime.now(timezone.utc),
        )
        self.message_log.append(entry)

        logger.info("Recorded contact submission")
