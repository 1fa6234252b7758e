"""
Utilitaires de session / Session utilities.
Jetons JWT emis apres la porte par mot de passe (pas une frontiere de securite).
JWT tokens issued after the password gate (not a security boundary).
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from fuel_tracker.config import settings


def create_access_token(subject: str = "owner") -> str:
    """Créer un jeton de session / Create a session token."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": subject, "type": "access", "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict | None:
    """Décoder un jeton / Decode a token. Returns None if invalid."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None
