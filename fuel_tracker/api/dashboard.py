"""Route tableau de bord / Dashboard route."""

from fastapi import APIRouter, Depends

from fuel_tracker.api.deps import get_store, require_session
from fuel_tracker.config import settings
from fuel_tracker.schemas.dashboard import DashboardResponse, RecentRecordRow, StatCard
from fuel_tracker.schemas.statistics import Statistics
from fuel_tracker.services.fuel_log_store import FuelLogStore
from fuel_tracker.utils.formatting import format_currency, format_date, format_liters, format_odometer

router = APIRouter(dependencies=[Depends(require_session)])


def _cards(stats: Statistics) -> list[StatCard]:
    return [
        StatCard(title="总花费", value=format_currency(stats.total_cost)),
        StatCard(title="总加油量", value=format_liters(stats.total_fuel)),
        StatCard(title="平均油耗", value=f"{stats.average_fuel_efficiency:.1f}km/L"),
        StatCard(
            title="总节省",
            value=format_currency(stats.total_savings),
            subtitle=f"记录数量: {stats.record_count}",
        ),
    ]


@router.get("", response_model=DashboardResponse)
async def dashboard(vehicle_id: str | None = None, store: FuelLogStore = Depends(get_store)):
    """
    Synthese du vehicule selectionne / Selected vehicle summary.
    Sans vehicle_id, le premier vehicule est retenu / Without vehicle_id, the first vehicle is used.
    """
    vehicles = await store.list_vehicles()
    if vehicle_id is None and vehicles:
        vehicle_id = vehicles[0].id
    vehicle = next((v for v in vehicles if v.id == vehicle_id), None)

    if vehicle_id is None:
        return DashboardResponse(vehicles=vehicles, statistics=Statistics())

    stats = await store.statistics(vehicle_id)
    recent = await store.recent_records(vehicle_id, limit=settings.RECENT_RECORDS_LIMIT)
    rows = [
        RecentRecordRow(
            record=record,
            date_display=format_date(record.date),
            odometer_display=format_odometer(record.odometer),
            fuel_display=f"{record.fuel_amount:g}L",
            cost_display=format_currency(record.cost),
            actual_payment_display=format_currency(record.actual_payment),
            image_count=len(record.images),
        )
        for record in recent
    ]
    return DashboardResponse(
        vehicles=vehicles,
        selected_vehicle_id=vehicle_id,
        vehicle=vehicle,
        statistics=stats,
        cards=_cards(stats) if stats.record_count else [],
        recent_records=rows,
    )
