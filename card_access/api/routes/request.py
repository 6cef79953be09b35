# =======================================================================================
# card_access/api/routes/request.py - Reader Endpoints
# =======================================================================================
import logging
from fastapi import APIRouter, Depends
from ...models.schemas import (
    AddCardRequest,
    AddCardResponse,
    KeyRequest,
    KeyResponse,
    VerifyRequest,
    VerifyResponse,
)
from ...services.container import AccessServices
from ...utils.exceptions import StorageError
from ..dependencies import get_services, parse_payload, read_json_body

logger = logging.getLogger(__name__)

router = APIRouter()

# Readers only ever see HTTP 200 with an ok flag; failures never carry detail.


@router.post("/request/verify", response_model=VerifyResponse)
def verify_card(
    body: bytes = Depends(read_json_body),
    services: AccessServices = Depends(get_services),
):
    """Check a card's serial number and authtoken for a door reader."""
    request = parse_payload(VerifyRequest, body)
    if request is None:
        logger.info("Malformed verify request")
        return VerifyResponse.denied()

    try:
        return services.verification.verify(request)
    except StorageError:
        logger.exception("Verify failed for card %s", request.serialNumber)
        return VerifyResponse.denied()


@router.post("/request/key", response_model=KeyResponse)
def request_key(
    body: bytes = Depends(read_json_body),
    services: AccessServices = Depends(get_services),
):
    """Hand a card's read key (or write key) to an authorized reader."""
    request = parse_payload(KeyRequest, body)
    if request is None:
        logger.info("Malformed key request")
        return KeyResponse.denied()

    try:
        return services.keys.issue_key(request)
    except StorageError:
        logger.exception("Key request failed for card %s", request.serialNumber)
        return KeyResponse.denied()


@router.post("/request/addCard", response_model=AddCardResponse)
def add_card(
    body: bytes = Depends(read_json_body),
    services: AccessServices = Depends(get_services),
):
    """Provision a blank card with fresh secrets."""
    request = parse_payload(AddCardRequest, body)
    if request is None:
        logger.info("Malformed addCard request")
        return AddCardResponse.denied()

    try:
        return services.keys.add_card(request)
    except StorageError:
        logger.exception("addCard failed for card %s", request.serialNumber)
        return AddCardResponse.denied()
