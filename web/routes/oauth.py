"""
Routes for starting an OAuth2 authorization-code flow.
"""
import secrets
from urllib.parse import urlencode

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import RedirectResponse

from core.config import REGISTRATIONS, logger
from core.registrations import AUTHORIZATION_BASE_PATH

oauth_router = APIRouter()

STATE_SESSION_KEY = "oauth2_state"


@oauth_router.get(AUTHORIZATION_BASE_PATH + "/{registration_id}", include_in_schema=False)
async def authorize(request: Request, registration_id: str):
    registration = REGISTRATIONS.get(registration_id)
    if registration is None:
        logger.warning("Authorization requested for unknown registration: %r", registration_id)
        raise HTTPException(status_code=404, detail=f"Unknown client registration: {registration_id}")

    # State is checked by whoever handles the callback
    state = secrets.token_urlsafe(32)
    pending = dict(request.session.get(STATE_SESSION_KEY, {}))
    pending[registration_id] = state
    request.session[STATE_SESSION_KEY] = pending

    params = {
        "response_type": "code",
        "client_id": registration.client_id,
        "redirect_uri": registration.redirect_uri,
    }
    if registration.scopes:
        params["scope"] = " ".join(registration.scopes)
    params["state"] = state

    separator = "&" if "?" in registration.authorization_uri else "?"
    location = f"{registration.authorization_uri}{separator}{urlencode(params)}"
    logger.info("OAuth2 authorization initiated for %r via %s", registration_id, registration.authorization_uri)
    return RedirectResponse(location, status_code=302)
