"""
Schémas d'authentification / Authentication schemas.
Porte locale par mot de passe en clair / Plaintext local password gate.
"""

from pydantic import BaseModel, Field

from fuel_tracker.config import settings


class LoginRequest(BaseModel):
    """Requête de connexion / Login request."""
    password: str = Field(min_length=settings.MIN_PASSWORD_LENGTH, max_length=200)


class TokenResponse(BaseModel):
    """Réponse avec jeton / Token response."""
    access_token: str
    token_type: str = "bearer"


class AuthStatus(BaseModel):
    password_set: bool
