"""
Magasin du carnet de carburant / Fuel log store.

Objet explicite passe aux routes : quatre collections et un mot de passe, chacun
sous sa propre cle. Toute mutation relit la collection, construit la nouvelle liste
et la remplace d'un bloc via replace_collection().
Explicit store object handed to the routes: four collections plus a password, each
under its own key. Every mutation reads a collection, builds the new list and swaps
it in one piece through replace_collection().
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.models.storage_entry import StorageEntry
from fuel_tracker.schemas.fuel_record import FuelRecord, FuelRecordCreate
from fuel_tracker.schemas.option import Option
from fuel_tracker.schemas.statistics import Statistics
from fuel_tracker.schemas.vehicle import Vehicle, VehicleCreate
from fuel_tracker.services.derived_fields import DerivedFieldCalculator
from fuel_tracker.services.statistics_service import StatisticsService

logger = logging.getLogger(__name__)

VEHICLES_KEY = "fuel-tracker-vehicles"
RECORDS_KEY = "fuel-tracker-records"
FUEL_TYPES_KEY = "fuel-tracker-fuel-types"
GAS_STATIONS_KEY = "fuel-tracker-gas-stations"
PASSWORD_KEY = "fuel-tracker-password"

COLLECTION_KEYS = (VEHICLES_KEY, RECORDS_KEY, FUEL_TYPES_KEY, GAS_STATIONS_KEY)


class RecordNotFound(LookupError):
    """Entite absente / Entity not found."""

    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class ConfirmationRequired(RuntimeError):
    """Suppression en cascade non confirmee / Cascade delete not confirmed."""


class InvalidOption(ValueError):
    """Nom d'option invalide / Invalid option name."""


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def new_id() -> str:
    return str(uuid.uuid4())


class FuelLogStore:
    """Acces aux collections persistees / Access to the persisted collections."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ─── Couche cle-valeur / Key-value layer ───

    async def _entry(self, key: str) -> StorageEntry | None:
        result = await self.session.execute(select(StorageEntry).where(StorageEntry.key == key))
        return result.scalar_one_or_none()

    async def has_key(self, key: str) -> bool:
        return await self._entry(key) is not None

    async def read(self, key: str, default: Any = None) -> Any:
        entry = await self._entry(key)
        if entry is None:
            return default
        return json.loads(entry.value)

    async def write(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        entry = await self._entry(key)
        if entry is None:
            self.session.add(StorageEntry(key=key, value=payload, updated_at=now_iso()))
        else:
            entry.value = payload
            entry.updated_at = now_iso()
        await self.session.flush()

    async def replace_collection(self, key: str, items: list) -> None:
        """Point d'entree unique des mutations / Single entry point for mutations."""
        if key not in COLLECTION_KEYS:
            raise KeyError(f"unknown collection {key}")
        await self.write(key, [item.model_dump(mode="json", by_alias=True) for item in items])

    # ─── Vehicules / Vehicles ───

    async def list_vehicles(self) -> list[Vehicle]:
        return [Vehicle.model_validate(item) for item in await self.read(VEHICLES_KEY, [])]

    async def get_vehicle(self, vehicle_id: str) -> Vehicle:
        for vehicle in await self.list_vehicles():
            if vehicle.id == vehicle_id:
                return vehicle
        raise RecordNotFound("Vehicle", vehicle_id)

    async def add_vehicle(self, data: VehicleCreate) -> Vehicle:
        vehicles = await self.list_vehicles()
        vehicle = Vehicle(**data.model_dump(), id=new_id(), created_at=now_iso())
        await self.replace_collection(VEHICLES_KEY, [*vehicles, vehicle])
        logger.info("Vehicle %s added (%s)", vehicle.id, vehicle.license_plate)
        return vehicle

    async def edit_vehicle(self, vehicle_id: str, data: VehicleCreate) -> Vehicle:
        """Remplacement complet, id et createdAt conserves / Full replacement keeping id and createdAt."""
        vehicles = await self.list_vehicles()
        updated = None
        result = []
        for vehicle in vehicles:
            if vehicle.id == vehicle_id:
                updated = Vehicle(**data.model_dump(), id=vehicle.id, created_at=vehicle.created_at)
                result.append(updated)
            else:
                result.append(vehicle)
        if updated is None:
            raise RecordNotFound("Vehicle", vehicle_id)
        await self.replace_collection(VEHICLES_KEY, result)
        return updated

    async def delete_vehicle(self, vehicle_id: str, confirm: bool = False) -> int:
        """
        Supprimer un vehicule et tous ses pleins / Delete a vehicle and all its records.
        Sans confirmation rien n'est modifie / Nothing changes without confirmation.
        Retourne le nombre de pleins supprimes / Returns the number of records removed.
        """
        vehicles = await self.list_vehicles()
        if not any(vehicle.id == vehicle_id for vehicle in vehicles):
            raise RecordNotFound("Vehicle", vehicle_id)
        if not confirm:
            raise ConfirmationRequired(f"deleting vehicle {vehicle_id} requires confirmation")

        records = await self.list_records()
        kept = [record for record in records if record.vehicle_id != vehicle_id]
        await self.replace_collection(VEHICLES_KEY, [v for v in vehicles if v.id != vehicle_id])
        await self.replace_collection(RECORDS_KEY, kept)
        removed = len(records) - len(kept)
        logger.info("Vehicle %s deleted with %d record(s)", vehicle_id, removed)
        return removed

    # ─── Pleins / Fuel records ───

    async def list_records(self, vehicle_id: str | None = None) -> list[FuelRecord]:
        records = [FuelRecord.model_validate(item) for item in await self.read(RECORDS_KEY, [])]
        if vehicle_id is not None:
            records = [record for record in records if record.vehicle_id == vehicle_id]
        return records

    async def get_record(self, record_id: str) -> FuelRecord:
        for record in await self.list_records():
            if record.id == record_id:
                return record
        raise RecordNotFound("FuelRecord", record_id)

    @staticmethod
    def _build_record(data: FuelRecordCreate, record_id: str, created_at: str) -> FuelRecord:
        derived = DerivedFieldCalculator.derive(
            data.fuel_amount, data.cost, data.actual_payment, data.price_per_liter
        )
        fields = data.model_dump(exclude={"actual_payment", "price_per_liter"})
        return FuelRecord(
            **fields,
            id=record_id,
            actual_payment=derived.actual_payment,
            price_per_liter=derived.price_per_liter,
            discounted_price_per_liter=derived.discounted_price_per_liter,
            created_at=created_at,
        )

    async def add_record(self, data: FuelRecordCreate) -> FuelRecord:
        records = await self.list_records()
        record = self._build_record(data, new_id(), now_iso())
        await self.replace_collection(RECORDS_KEY, [*records, record])
        logger.info("Fuel record %s added for vehicle %s", record.id, record.vehicle_id)
        return record

    async def edit_record(self, record_id: str, data: FuelRecordCreate) -> FuelRecord:
        records = await self.list_records()
        updated = None
        result = []
        for record in records:
            if record.id == record_id:
                updated = self._build_record(data, record.id, record.created_at)
                result.append(updated)
            else:
                result.append(record)
        if updated is None:
            raise RecordNotFound("FuelRecord", record_id)
        await self.replace_collection(RECORDS_KEY, result)
        return updated

    async def delete_record(self, record_id: str) -> None:
        records = await self.list_records()
        kept = [record for record in records if record.id != record_id]
        if len(kept) == len(records):
            raise RecordNotFound("FuelRecord", record_id)
        await self.replace_collection(RECORDS_KEY, kept)
        logger.info("Fuel record %s deleted", record_id)

    async def _replace_images(self, record_id: str, update) -> FuelRecord:
        records = await self.list_records()
        for index, record in enumerate(records):
            if record.id == record_id:
                records[index] = record.model_copy(update={"images": update(list(record.images))})
                await self.replace_collection(RECORDS_KEY, records)
                return records[index]
        raise RecordNotFound("FuelRecord", record_id)

    async def add_record_images(self, record_id: str, images: list[str]) -> FuelRecord:
        return await self._replace_images(record_id, lambda current: current + list(images))

    async def remove_record_image(self, record_id: str, index: int) -> FuelRecord:
        def _drop(current: list[str]) -> list[str]:
            if not 0 <= index < len(current):
                raise RecordNotFound("Image", str(index))
            return current[:index] + current[index + 1:]

        return await self._replace_images(record_id, _drop)

    async def recent_records(self, vehicle_id: str, limit: int | None = None) -> list[FuelRecord]:
        """Pleins du plus recent au plus ancien / Records newest first."""
        records = sorted(await self.list_records(vehicle_id), key=lambda r: r.date, reverse=True)
        return records if limit is None else records[:limit]

    async def last_record(self, vehicle_id: str) -> FuelRecord | None:
        records = await self.recent_records(vehicle_id, limit=1)
        return records[0] if records else None

    async def statistics(self, vehicle_id: str) -> Statistics:
        return StatisticsService.calculate_statistics(await self.list_records(vehicle_id))

    # ─── Options (types de carburant, stations) / Options (fuel types, gas stations) ───

    async def _list_options(self, key: str) -> list[Option]:
        return [Option.model_validate(item) for item in await self.read(key, [])]

    async def _add_option(self, key: str, name: str) -> Option:
        name = name.strip()
        if not name:
            raise InvalidOption("option name must not be blank")
        options = await self._list_options(key)
        option = Option(id=new_id(), name=name, created_at=now_iso())
        await self.replace_collection(key, [*options, option])
        return option

    async def _delete_option(self, key: str, option_id: str, kind: str) -> None:
        # Les pleins gardent le nom en texte libre / Records keep the name as free text
        options = await self._list_options(key)
        kept = [option for option in options if option.id != option_id]
        if len(kept) == len(options):
            raise RecordNotFound(kind, option_id)
        await self.replace_collection(key, kept)

    async def list_fuel_types(self) -> list[Option]:
        return await self._list_options(FUEL_TYPES_KEY)

    async def add_fuel_type(self, name: str) -> Option:
        return await self._add_option(FUEL_TYPES_KEY, name)

    async def delete_fuel_type(self, option_id: str) -> None:
        await self._delete_option(FUEL_TYPES_KEY, option_id, "FuelType")

    async def list_gas_stations(self) -> list[Option]:
        return await self._list_options(GAS_STATIONS_KEY)

    async def add_gas_station(self, name: str) -> Option:
        return await self._add_option(GAS_STATIONS_KEY, name)

    async def delete_gas_station(self, option_id: str) -> None:
        await self._delete_option(GAS_STATIONS_KEY, option_id, "GasStation")

    async def seed_options(self, key: str, names: list[str]) -> bool:
        """Ecrire la liste initiale si la cle est absente / Write the initial list if the key is absent."""
        if await self.has_key(key):
            return False
        created_at = now_iso()
        options = [Option(id=str(i), name=name, created_at=created_at) for i, name in enumerate(names, start=1)]
        await self.replace_collection(key, options)
        return True

    # ─── Mot de passe / Password ───

    async def get_password(self) -> str:
        return await self.read(PASSWORD_KEY, "")

    async def set_password(self, password: str) -> None:
        await self.write(PASSWORD_KEY, password)

    async def login(self, password: str) -> bool:
        """
        Porte locale, comparaison en clair / Local gate, plaintext comparison.
        Premier usage : le mot de passe saisi devient le mot de passe.
        First use: the submitted password becomes the password.
        """
        stored = await self.get_password()
        if not stored:
            await self.set_password(password)
            logger.info("Password set on first login")
            return True
        return stored == password
