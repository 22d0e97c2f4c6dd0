import logging

import requests

logger = logging.getLogger(__name__)


class RecaptchaVerifier:
    """
    Client for the reCAPTCHA siteverify endpoint.

    One synchronous POST per token, no retries. Transport errors are raised
    to the caller as requests.RequestException.
    """

    def __init__(self, secret: str, verify_url: str):
        self.secret = secret
        self.verify_url = verify_url

    def verify(self, token: str) -> bool:
        """
        Check a client token against the verification service.

        Args:
            token: The response token produced by the reCAPTCHA widget

        Returns:
            True if the service reports success, False otherwise
        """
        response = requests.post(
            self.verify_url,
            params={"secret": self.secret, "response": token},
        )
        response.raise_for_status()

        result = response.json()
        if not result.get("success"):
            logger.warning(f"reCAPTCHA rejected token: {result.get('error-codes')}")
            return False
        return True
