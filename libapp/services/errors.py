"""Errors raised by the service layer and translated to responses by the API routes."""

GENERIC_LOGIN_ERROR = "Incorrect email or password"


class AuthFailure(Exception):
    """Raised when an email is unknown or the password does not match.

    Both cases share one message so callers cannot tell which accounts exist.
    """

    def __init__(self, message: str = GENERIC_LOGIN_ERROR) -> None:
        self.message = message
        super().__init__(message)


class EmailAlreadyRegistered(Exception):
    """Raised on signup when the normalized email already belongs to a user."""

    def __init__(self, email: str) -> None:
        self.email = email
        self.message = "An account with this email already exists."
        super().__init__(self.message)


class NotFoundError(Exception):
    """Raised when a referenced user, library or membership does not exist."""

    def __init__(self, entity: str, entity_id: int | str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.message = f"{entity} {entity_id} not found."
        super().__init__(self.message)


class LoginRequired(Exception):
    """Raised by the access guard dependency; rendered as a redirect, never a hard failure."""

    def __init__(self, redirect_target: str) -> None:
        self.redirect_target = redirect_target
        self.message = "Login required"
        super().__init__(self.message)
