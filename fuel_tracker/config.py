"""
Configuration de l'application / Application configuration.
Utilise pydantic-settings pour charger depuis .env ou variables d'environnement.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Fuel Tracker"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True

    # Stockage cle-valeur - SQLite par defaut / Key-value storage - SQLite by default
    DATABASE_URL: str = "sqlite+aiosqlite:///./fuel_tracker.db"
    DATABASE_ECHO: bool = False

    # CORS - origines autorisées / allowed origins
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Jeton de session / Session token
    SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720

    # Rate Limiting
    RATE_LIMIT_LOGIN: str = "5/minute"
    RATE_LIMIT_ENABLED: bool = True

    # Regles metier / Business rules
    MIN_PASSWORD_LENGTH: int = 4
    RECENT_RECORDS_LIMIT: int = 5

    # Listes d'options initiales / Initial option lists
    DEFAULT_FUEL_TYPES: list[str] = ["92号汽油", "95号汽油", "98号汽油", "0号柴油", "-10号柴油"]
    DEFAULT_GAS_STATIONS: list[str] = ["中石油", "中石化", "中海油", "壳牌", "道达尔"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
