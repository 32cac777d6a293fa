"""Lobby, session and wallet endpoints."""

from fastapi import APIRouter, HTTPException

from api.dependencies import TableDep
from api.schemas import GameInfoResponse, SessionResponse, WalletResponse
from api.session import create_session
from casino.outcome import GameType

router = APIRouter()


@router.post("/session")
async def new_session() -> SessionResponse:
    """Create a session with a fresh wallet."""
    return SessionResponse(session_id=await create_session())


@router.get("/games")
async def list_games() -> list[GameInfoResponse]:
    """List the games in the lobby."""
    return [
        GameInfoResponse(
            key=game.name.lower(),
            name=game.value,
            icon=game.icon,
            description=game.description,
        )
        for game in GameType
    ]


@router.get("/wallet")
async def get_wallet(table: TableDep) -> WalletResponse:
    """Get the balance and the recent history."""
    return WalletResponse.from_ledger(table.ledger)


@router.post("/wallet/reset")
async def reset_wallet(table: TableDep) -> WalletResponse:
    """Restore the starting balance and clear every game."""
    busy = table.reset()
    if busy:
        names = ", ".join(game.value for game in busy)
        raise HTTPException(status_code=409, detail=f"Finish the round in progress: {names}")
    return WalletResponse.from_ledger(table.ledger)
