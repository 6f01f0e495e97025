"""
Routes for the application root and the login page.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.config import AUTHORIZATION_PATH, LOGIN_VIEW, APP_NAME, REGISTRATIONS, TEMPLATES_DIR, logger
from core.registrations import authorization_path

templates = Jinja2Templates(directory=TEMPLATES_DIR)

pages_router = APIRouter()


def get_authorization_path() -> str:
    """Where the root path sends visitors to start the OAuth2 login."""
    return AUTHORIZATION_PATH


def get_login_view() -> str:
    return LOGIN_VIEW


@pages_router.get("/", include_in_schema=False)
async def root_redirect(target: str = Depends(get_authorization_path)):
    """Redirects the root path to the OAuth2 authorization endpoint."""
    logger.info(f"Redirecting to OAuth2 login: {target}")
    return RedirectResponse(url=target, status_code=302)


@pages_router.get("/index", response_class=HTMLResponse, include_in_schema=False)
async def login_page(request: Request, view: str = Depends(get_login_view)):
    """Serves the login page."""
    providers = [
        {"name": registration.client_name, "url": authorization_path(registration_id)}
        for registration_id, registration in REGISTRATIONS.items()
    ]
    return templates.TemplateResponse(
        request=request,
        name=f"{view}.html",
        context={"app_name": APP_NAME, "providers": providers},
    )
