"""Request Dependencies — hand the wired ContactService to route handlers.

Invariants:
    - The service is built once in main.lifespan and stored on app.state
    - A request against an unwired app fails with ConfigurationError, not AttributeError

Design Decisions:
    - app.state over a module-level singleton: each FastAPI app owns its wiring,
      tests swap it through dependency_overrides
"""

from fastapi import Request

from contact_api.core.errors import ConfigurationError
from contact_api.services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    service = getattr(request.app.state, "contact_service", None)
    if service is None:
        raise ConfigurationError("Contact service is not configured")
    return service
