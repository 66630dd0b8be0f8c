"""Contacts — create and look up contacts by name.

Invariants:
    - GET with missing/empty/unknown name → 200 with JSON null (not found is not an error)
    - POST success → 201 with empty body
    - POST with no body reaches the service as None → 400 CONTACT_MISSING
    - Business rule failures surface as 400 via the ContactApiError handler

Design Decisions:
    - Body is Optional so the "absent contact" rule stays in ContactService,
      not in FastAPI's request validation
    - Handlers are sync (def): FastAPI runs them in its threadpool, the store locks
"""

import logging

from fastapi import APIRouter, Body, Depends, Query, Response, status

from contact_api.api.dependencies import get_contact_service
from contact_api.schemas.contact import ContactPayload, ContactResponse
from contact_api.services.contact_service import ContactService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/contacts", tags=["contacts"])


@router.get("", response_model=ContactResponse | None)
def retrieve_contact(
    name: str | None = Query(None),
    service: ContactService = Depends(get_contact_service),
):
    """Look up a contact by name. Returns null when it does not exist."""
    contact = service.retrieve(name)
    if contact is None:
        return None
    return ContactResponse.from_domain(contact)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_contact(
    body: ContactPayload | None = Body(None),
    service: ContactService = Depends(get_contact_service),
):
    """Create a contact. Creating an existing name leaves the stored one untouched."""
    service.create(body.to_domain() if body is not None else None)
    return Response(status_code=status.HTTP_201_CREATED)
