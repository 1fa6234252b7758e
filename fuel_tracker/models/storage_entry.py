"""Modèle entrée de stockage / Storage entry model.

Une ligne par cle : la valeur est un document JSON (tableau d'entites ou chaine).
One row per key: the value is a JSON document (entity array or bare string).
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fuel_tracker.database import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)  # JSON
    updated_at: Mapped[str | None] = mapped_column(String(32))  # ISO 8601

    def __repr__(self) -> str:
        return f"<StorageEntry {self.key} ({len(self.value or '')} bytes)>"
