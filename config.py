"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class SecurityConfig:
    """Security configuration."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    )


@dataclass(frozen=True)
class TableLimits:
    """Wallet, history and betting limits shared by every game."""

    starting_balance: int = field(
        default_factory=lambda: _env_int("CASINO_STARTING_BALANCE", 1000)
    )
    max_history: int = field(default_factory=lambda: _env_int("CASINO_MAX_HISTORY", 20))
    max_recent_results: int = field(
        default_factory=lambda: _env_int("CASINO_MAX_RECENT", 10)
    )
    bet_min: int = field(default_factory=lambda: _env_int("CASINO_BET_MIN", 10))
    bet_max: int = field(default_factory=lambda: _env_int("CASINO_BET_MAX", 100))
    bet_step: int = field(default_factory=lambda: _env_int("CASINO_BET_STEP", 10))

    # Slot machine
    slot_payout_multiplier: int = 5
    slot_max_bet_cost: int = 100
    slot_max_bet_payout: int = 500

    # Blackjack
    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        if self.bet_min <= 0 or self.bet_step <= 0:
            raise ValueError("Bet minimum and step must be positive")
        if self.bet_max < self.bet_min:
            raise ValueError("Bet maximum must not be below the minimum")
        if self.max_history < 1 or self.max_recent_results < 1:
            raise ValueError("History caps must be at least 1")

    @property
    def allowed_bets(self) -> list[int]:
        """Return every wager the betting slider can produce."""
        return list(range(self.bet_min, self.bet_max + 1, self.bet_step))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    session_ttl: int = 3600  # Session timeout in seconds

    limits: TableLimits = field(default_factory=TableLimits)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)


# Global configuration instance
config = AppConfig()
