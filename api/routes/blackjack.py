"""Blackjack endpoints."""

from fastapi import APIRouter

from api.dependencies import TableDep, unwrap
from api.schemas import BetRequest, BlackjackResponse

router = APIRouter()


@router.get("/state")
async def get_state(table: TableDep) -> BlackjackResponse:
    """Get the current table."""
    return BlackjackResponse.from_snapshot(table.blackjack.current_state())


@router.post("/bet")
async def place_bet(request: BetRequest, table: TableDep) -> BlackjackResponse:
    """Place a bet and deal."""
    return BlackjackResponse.from_snapshot(unwrap(table.blackjack.place_bet(request.amount)))


@router.post("/hit")
async def hit(table: TableDep) -> BlackjackResponse:
    return BlackjackResponse.from_snapshot(unwrap(table.blackjack.hit()))


@router.post("/stand")
async def stand(table: TableDep) -> BlackjackResponse:
    return BlackjackResponse.from_snapshot(unwrap(table.blackjack.stand()))


@router.post("/new-round")
async def new_round(table: TableDep) -> BlackjackResponse:
    """Clear a settled round."""
    return BlackjackResponse.from_snapshot(unwrap(table.blackjack.new_round()))
