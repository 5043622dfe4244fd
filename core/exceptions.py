"""Exception hierarchy for the orchestration engine."""


class SymphonyError(Exception):
    """Base class for all orchestration errors."""


class NoSeekersAvailable(SymphonyError):
    """Raised when a perform() call resolves to an empty seeker set."""

    def __init__(self, message: str = "No seekers available"):
        super().__init__(message)


class SeekerError(SymphonyError):
    """Raised inside a seeker. Never escapes the seeker boundary."""

    def __init__(self, seeker: str, message: str):
        self.seeker = seeker
        super().__init__(f"{seeker}: {message}")
