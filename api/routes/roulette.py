"""Roulette endpoints."""

from fastapi import APIRouter, HTTPException

from api.dependencies import TableDep, unwrap
from api.schemas import (
    RouletteBetRequest,
    RouletteResponse,
    SettleRequest,
    SpinTicketResponse,
)
from casino.game import BetType, RouletteBet

router = APIRouter()


@router.get("/state")
async def get_state(table: TableDep) -> RouletteResponse:
    """Get the current table and the last pockets."""
    return RouletteResponse.from_snapshot(table.roulette.current_state())


@router.post("/spin")
async def spin(request: RouletteBetRequest, table: TableDep) -> SpinTicketResponse:
    """
    Take the wager and start the wheel.

    The client animates the wheel, then calls ``/settle`` with the
    returned spin id.
    """
    try:
        bet = RouletteBet(
            bet_type=BetType[request.bet_type.upper()],
            amount=request.amount,
            selected_number=request.selected_number,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    ticket = unwrap(table.roulette.spin(bet))
    return SpinTicketResponse(spin_id=ticket.spin_id, balance=table.ledger.balance)


@router.post("/settle")
async def settle(request: SettleRequest, table: TableDep) -> RouletteResponse:
    """Land the ball for a pending spin."""
    ticket = table.roulette.pending
    if ticket is None or ticket.spin_id != request.spin_id:
        raise HTTPException(status_code=409, detail="No such spin is pending")
    return RouletteResponse.from_snapshot(unwrap(table.roulette.settle(ticket)))


@router.post("/new-round")
async def new_round(table: TableDep) -> RouletteResponse:
    return RouletteResponse.from_snapshot(unwrap(table.roulette.new_round()))
