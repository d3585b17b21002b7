class SessionError(Exception):
    """Base exception for training session errors."""


class SessionBusyError(SessionError):
    """Raised when an operation starts while another is still running."""


class InvalidSessionStateError(SessionError):
    """Raised when an operation is not allowed in the current state."""


class OutputNotApplicableError(SessionError):
    """Raised when the chosen output type does not accept the uploaded file type."""


class CreationNotFoundError(SessionError):
    """Raised when selecting a creation id that is not in history."""
