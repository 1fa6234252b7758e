"""
Connexion au stockage / Storage connection.
Le stockage cle-valeur repose sur SQLAlchemy 2.0 async (SQLite par defaut).
The key-value storage sits on SQLAlchemy 2.0 async (SQLite by default).
"""

import asyncio
import weakref
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from fuel_tracker.config import settings

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

# Configuration moteur / Engine configuration
_engine_kwargs: dict = {
    "echo": settings.DATABASE_ECHO,
}

if not _is_sqlite:
    _engine_kwargs.update({
        "pool_size": 5,
        "max_overflow": 5,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    })

engine = create_async_engine(settings.DATABASE_URL, **_engine_kwargs)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

# Un verrou par boucle d'evenements / One lock per event loop
_session_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


class Base(DeclarativeBase):
    pass


def _session_lock() -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    lock = _session_locks.get(loop)
    if lock is None:
        lock = _session_locks[loop] = asyncio.Lock()
    return lock


@asynccontextmanager
async def serialized_session():
    """Session exclusive, verrou tenu jusqu'au commit / Exclusive session, lock held through commit.

    Chaque mutation relit puis remplace une collection entiere : deux sessions
    ne doivent jamais se chevaucher. Each mutation reads then replaces a whole
    collection: two sessions must never overlap.
    """
    async with _session_lock():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


async def get_db() -> AsyncSession:
    """Dependance FastAPI pour obtenir une session / FastAPI dependency for a storage session.

    Un commit par requete : une cascade vehicule + pleins est tout-ou-rien.
    One commit per request: a vehicle + records cascade is all-or-nothing.
    """
    async with serialized_session() as session:
        yield session


async def init_db():
    """Creer les tables au demarrage / Create tables on startup."""
    # Enregistrer les modeles / Register models on the metadata
    import fuel_tracker.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
