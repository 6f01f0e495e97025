"""
Pydantic schemas for configuration and API output.
"""
from pydantic import BaseModel
from typing import List


class ClientRegistration(BaseModel):
    """An OAuth2 client registered with an identity provider."""
    registration_id: str
    client_id: str
    client_name: str
    authorization_uri: str
    redirect_uri: str
    scopes: List[str] = []


class HealthSchema(BaseModel):
    status: str
    timestamp: str
    service: str
