"""In-memory session management with signed session ids."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from uuid import uuid4

from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from config import config
from casino.table import CasinoTable


class SessionSigner:
    """Sign and verify session IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the signer with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._serializer = URLSafeTimedSerializer(self._secret_key)

    def sign(self, session_id: str) -> str:
        """Create a signed token from a session ID."""
        return self._serializer.dumps(session_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract session_id from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to session_ttl)

        Returns:
            The session ID if valid, None otherwise
        """
        max_age = max_age or config.session_ttl
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


# Global signer instance
_session_signer: SessionSigner | None = None


def get_session_signer() -> SessionSigner:
    """Get or create the session signer."""
    global _session_signer
    if _session_signer is None:
        _session_signer = SessionSigner()
    return _session_signer


class SessionStore(ABC):
    """Abstract store of casino tables keyed by session id."""

    @abstractmethod
    async def get(self, session_id: str) -> CasinoTable | None:
        """Get the table for a session."""
        ...

    @abstractmethod
    async def set(self, session_id: str, table: CasinoTable, ttl: int | None = None) -> None:
        """Store a table."""
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Delete session."""
        ...

    async def exists(self, session_id: str) -> bool:
        """Check if session exists."""
        return await self.get(session_id) is not None

    def create_session_id(self) -> str:
        """Create a new signed session token."""
        return get_session_signer().sign(str(uuid4()))


class InMemorySessionStore(SessionStore):
    """
    Process-lifetime session store.

    Tables are never persisted; an expired or deleted session starts over
    with a fresh wallet.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, tuple[CasinoTable, datetime]] = {}

    async def get(self, session_id: str) -> CasinoTable | None:
        """Get the table for a session."""
        if session_id not in self._sessions:
            return None

        table, expiry = self._sessions[session_id]
        if expiry < datetime.now():
            await self.delete(session_id)
            return None

        return table

    async def set(
        self,
        session_id: str,
        table: CasinoTable,
        ttl: int | None = None,
    ) -> None:
        """Store a table."""
        self._sessions[session_id] = (table, self._expiry(ttl))

    async def delete(self, session_id: str) -> None:
        """Delete session."""
        self._sessions.pop(session_id, None)

    async def cleanup_expired(self) -> int:
        """Remove expired sessions."""
        now = datetime.now()
        expired = [
            sid for sid, (_, expiry) in self._sessions.items() if expiry < now
        ]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    @staticmethod
    def _expiry(ttl: int | None = None) -> datetime:
        return datetime.now() + timedelta(seconds=ttl or config.session_ttl)


# Global session store instance
_session_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get or create the session store."""
    global _session_store
    if _session_store is None:
        _session_store = InMemorySessionStore()
    return _session_store


async def create_session(table: CasinoTable | None = None) -> str:
    """Create a new session holding a fresh table."""
    store = get_session_store()
    session_id = store.create_session_id()
    await store.set(session_id, table or CasinoTable())
    return session_id


async def get_table(session_id: str) -> CasinoTable | None:
    """Get the table for a session."""
    return await get_session_store().get(session_id)


async def delete_session(session_id: str) -> None:
    """Delete a session."""
    await get_session_store().delete(session_id)


def extract_session_id(token: str) -> str | None:
    """
    Extract the raw session ID from a signed token.

    Args:
        token: The signed session token

    Returns:
        The raw session ID if valid, None otherwise
    """
    signer = get_session_signer()
    return signer.unsign(token)
