"""Recoverable errors raised while placing bets and advancing rounds."""


class CasinoError(Exception):
    """Base class for every rejected casino operation."""


class InsufficientBalance(CasinoError):
    """The wager exceeds the current balance."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient balance: {required} coins required, {available} available"
        )


class IllegalTransition(CasinoError):
    """An operation was invoked outside the state where it is valid."""

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while {state}")


class InvalidWager(CasinoError):
    """The wager is outside the configured bounds or off the bet step."""

    def __init__(self, amount: int, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid wager of {amount}: {reason}")
