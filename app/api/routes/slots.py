from datetime import date

from fastapi import APIRouter, Query

from app.api.schemas.booking import SlotsResponse
from app.services.slot_service import is_weekend, reconcile_time, slots_for

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("", response_model=SlotsResponse)
async def available_slots(
    date_param: date = Query(..., alias="date"),
    time: str | None = Query(None),
) -> SlotsResponse:
    """Return the time slots offered on the given date.

    Clients call this whenever the date changes, passing their current time
    selection; ``time`` comes back as None (and ``time_cleared`` true) when
    the new date does not offer it.
    """
    kept = reconcile_time(date_param, time)
    return SlotsResponse(
        date=date_param.isoformat(),
        weekend=is_weekend(date_param),
        slots=slots_for(date_param),
        time=kept,
        time_cleared=time is not None and kept is None,
    )
