"""
OAuth2 client registrations, loaded from environment variables.

Each registration id listed in OAUTH2_REGISTRATIONS reads its settings from
OAUTH2_<ID>_* variables, e.g. OAUTH2_AUTH_CLIENT_ID for the "auth" registration.
"""
import re
from typing import Dict, List, Mapping

from core.schemas import ClientRegistration

DEFAULT_REGISTRATION_ID = "auth"
DEFAULT_AUTHORIZATION_URI = "http://localhost:9000/oauth2/authorize"
DEFAULT_SCOPE = "openid profile"

AUTHORIZATION_BASE_PATH = "/oauth2/authorization"


def authorization_path(registration_id: str) -> str:
    """Path that starts the authorization flow for a registration."""
    return f"{AUTHORIZATION_BASE_PATH}/{registration_id}"


def _env_prefix(registration_id: str) -> str:
    return "OAUTH2_" + registration_id.upper().replace("-", "_") + "_"


def _split_scopes(value: str) -> List[str]:
    return [scope for scope in re.split(r"[,\s]+", value) if scope]


def load_registration(
    registration_id: str, environ: Mapping[str, str], app_domain: str = "localhost:8080"
) -> ClientRegistration:
    prefix = _env_prefix(registration_id)
    return ClientRegistration(
        registration_id=registration_id,
        client_id=environ.get(prefix + "CLIENT_ID", registration_id),
        client_name=environ.get(prefix + "CLIENT_NAME", registration_id),
        authorization_uri=environ.get(prefix + "AUTHORIZATION_URI", DEFAULT_AUTHORIZATION_URI),
        redirect_uri=environ.get(
            prefix + "REDIRECT_URI", f"http://{app_domain}/login/oauth2/code/{registration_id}"
        ),
        scopes=_split_scopes(environ.get(prefix + "SCOPE", DEFAULT_SCOPE)),
    )


def load_registrations(
    environ: Mapping[str, str], app_domain: str = "localhost:8080"
) -> Dict[str, ClientRegistration]:
    """Builds the registration table, keyed by registration id."""
    ids = environ.get("OAUTH2_REGISTRATIONS", DEFAULT_REGISTRATION_ID).split(",")
    registrations: Dict[str, ClientRegistration] = {}
    for raw_id in ids:
        registration_id = raw_id.strip()
        if not registration_id or registration_id in registrations:
            continue
        registrations[registration_id] = load_registration(registration_id, environ, app_domain)
    return registrations

