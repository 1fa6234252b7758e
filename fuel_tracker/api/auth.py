"""
Routes d'authentification / Authentication routes.
Mot de passe local en clair ; le premier login le definit.
Plaintext local password; the first login sets it.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from fuel_tracker.api.deps import get_store
from fuel_tracker.config import settings
from fuel_tracker.rate_limit import limiter
from fuel_tracker.schemas.auth import AuthStatus, LoginRequest, TokenResponse
from fuel_tracker.services.fuel_log_store import FuelLogStore
from fuel_tracker.utils.auth import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limiter.limit(settings.RATE_LIMIT_LOGIN)
async def login(request: Request, data: LoginRequest, store: FuelLogStore = Depends(get_store)):
    """Connexion / Login."""
    if not await store.login(data.password):
        client = request.client.host if request.client else "unknown"
        logger.warning("Failed login from %s", client)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    return TokenResponse(access_token=create_access_token())


@router.get("/status", response_model=AuthStatus)
async def auth_status(store: FuelLogStore = Depends(get_store)):
    """Mot de passe deja defini ? / Is a password already set?"""
    return AuthStatus(password_set=bool(await store.get_password()))
