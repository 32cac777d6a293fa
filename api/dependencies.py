"""Shared request dependencies and rejection handling."""

from typing import Annotated, TypeVar

from fastapi import Depends, Header, HTTPException

from api.session import extract_session_id, get_table
from casino.errors import IllegalTransition, InsufficientBalance, InvalidWager
from casino.game import Rejected
from casino.table import CasinoTable

T = TypeVar("T")

REJECTION_STATUS = {
    InvalidWager: 422,
    InsufficientBalance: 402,
    IllegalTransition: 409,
}


async def current_table(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> CasinoTable:
    """Resolve the session header to the player's table."""
    if extract_session_id(session_id) is None:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    table = await get_table(session_id)
    if table is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return table


def unwrap(result: T | Rejected) -> T:
    """Return a successful result or raise the matching HTTP error."""
    if isinstance(result, Rejected):
        status = REJECTION_STATUS.get(type(result.error), 400)
        raise HTTPException(status_code=status, detail=result.message)
    return result


TableDep = Annotated[CasinoTable, Depends(current_table)]
