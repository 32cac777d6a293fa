"""Red Dog endpoints."""

from fastapi import APIRouter

from api.dependencies import TableDep, unwrap
from api.schemas import BetRequest, RedDogResponse

router = APIRouter()


@router.get("/state")
async def get_state(table: TableDep) -> RedDogResponse:
    """Get the current table."""
    return RedDogResponse.from_snapshot(table.red_dog.current_state())


@router.post("/bet")
async def place_bet(request: BetRequest, table: TableDep) -> RedDogResponse:
    """Place a bet and deal the first two cards."""
    return RedDogResponse.from_snapshot(unwrap(table.red_dog.place_bet(request.amount)))


@router.post("/draw")
async def draw_third(table: TableDep) -> RedDogResponse:
    """Draw the third card."""
    return RedDogResponse.from_snapshot(unwrap(table.red_dog.draw_third()))


@router.post("/fold")
async def fold(table: TableDep) -> RedDogResponse:
    return RedDogResponse.from_snapshot(unwrap(table.red_dog.fold()))


@router.post("/new-round")
async def new_round(table: TableDep) -> RedDogResponse:
    return RedDogResponse.from_snapshot(unwrap(table.red_dog.new_round()))
