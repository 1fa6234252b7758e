"""
Seed des listes d'options / Option list seeding.
Ecrit les types de carburant et stations par defaut au premier demarrage.
Writes the default fuel types and gas stations on first startup.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.config import settings
from fuel_tracker.services.fuel_log_store import FUEL_TYPES_KEY, GAS_STATIONS_KEY, FuelLogStore

logger = logging.getLogger(__name__)


async def seed_default_options(session: AsyncSession) -> None:
    """Créer les listes si absentes / Create the lists if absent."""
    store = FuelLogStore(session)
    for key, names in (
        (FUEL_TYPES_KEY, settings.DEFAULT_FUEL_TYPES),
        (GAS_STATIONS_KEY, settings.DEFAULT_GAS_STATIONS),
    ):
        if await store.seed_options(key, names):
            logger.info("Seeded %d default option(s) under %s", len(names), key)
        else:
            logger.info("%s already present, seed skipped", key)
    await session.commit()
