"""Error taxonomy for Goal Assistant."""


class GoalAssistantError(Exception):
    """Base class for all Goal Assistant errors."""


class BadRequestError(GoalAssistantError):
    """Malformed turn payload. No engine call is made."""


class EngineFailure(GoalAssistantError):
    """Completion engine call failed, timed out or was rejected."""


class TransportFailure(GoalAssistantError):
    """Client could not complete a round trip to the turn endpoint."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TurnInFlightError(GoalAssistantError):
    """A turn is already in progress for this conversation."""
