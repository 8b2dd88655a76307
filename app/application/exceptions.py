class AppointBookError(RuntimeError):
    """Base class for booking service errors."""
    pass


class NotAuthenticatedError(AppointBookError):
    """Raised when a guarded flow is opened without a signed-in user."""

    def __init__(self, message: str, redirect_to: str) -> None:
        super().__init__(message)
        self.redirect_to = redirect_to


class InvalidSelectionError(AppointBookError):
    """Raised when a wizard input fails its guard (unknown doctor, past date, bad slot)."""
    pass


class InvalidTransitionError(AppointBookError):
    """Raised when an operation is not allowed from the current wizard step."""
    pass


class PaymentFailedError(AppointBookError):
    """Raised by payment adapters when a charge does not go through."""
    pass


class BookingSessionNotFoundError(AppointBookError):
    """Raised when a booking session id is unknown or already closed."""
    pass
