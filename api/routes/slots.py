"""Slot machine endpoints."""

from fastapi import APIRouter

from api.dependencies import TableDep, unwrap
from api.schemas import BetRequest, SlotResponse

router = APIRouter()


@router.get("/state")
async def get_state(table: TableDep) -> SlotResponse:
    return SlotResponse.from_snapshot(table.slots.current_state())


@router.post("/spin")
async def spin(request: BetRequest, table: TableDep) -> SlotResponse:
    """Spin for the slider wager."""
    return SlotResponse.from_snapshot(unwrap(table.slots.spin(request.amount)))


@router.post("/max-bet")
async def max_bet(table: TableDep) -> SlotResponse:
    """Spin at the fixed max-bet cost."""
    return SlotResponse.from_snapshot(unwrap(table.slots.max_bet_spin()))
