"""
Dépendances injectées dans les routes / Route dependencies.
Session de stockage, magasin et porte de session.
Storage session, store object and session gate.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.database import get_db
from fuel_tracker.services.fuel_log_store import FuelLogStore, RecordNotFound
from fuel_tracker.utils.auth import decode_token

security = HTTPBearer()


async def get_store(db: AsyncSession = Depends(get_db)) -> FuelLogStore:
    """Magasin lie a la session de la requete / Store bound to the request session."""
    return FuelLogStore(db)


async def require_session(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """Valider le jeton de session / Validate the session token."""
    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")
    return payload["sub"]


def not_found(exc: RecordNotFound) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
