from fastapi import APIRouter, Depends, HTTPException, status
import logging

import requests

from inventory_app.api.deps import get_contact_service
from inventory_app.schemas.contact import ContactRequest, ContactResponse
from inventory_app.services.contact_service import (
    ContactService,
    ContactValidationError,
    CaptchaVerificationError
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post(
    "",
    response_model=ContactResponse,
    summary="Submit the contact form",
    description="""
    Record a contact form submission.

    The reCAPTCHA token is verified before anything is written. Accepted
    submissions are sanitized and appended to the message log.
    """
)
@router.post("/", response_model=ContactResponse, include_in_schema=False)
def submit_contact(
    contact: ContactRequest,
    service: ContactService = Depends(get_contact_service)
):
    """
    Submit a contact message.

    - **name**, **email**, **message**: required, non-empty
    - **token**: reCAPTCHA response token, required
    """
    try:
        service.submit(contact)
    except (ContactValidationError, CaptchaVerificationError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except (requests.RequestException, OSError) as e:
        logger.error(f"Contact submission failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return ContactResponse(success=True)
