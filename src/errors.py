"""Application error taxonomy.

Every error carries a stable ``kind`` and the HTTP status it maps to, so the
API layer can serialize them uniformly as ``{"error": message, "kind": kind}``.
"""


class AppError(Exception):
    """Base class for errors that are reported to API clients."""

    kind = "internal_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "kind": self.kind}


class ValidationError(AppError):
    """Malformed, missing or out-of-range input."""

    kind = "validation_error"
    status_code = 400


class InvalidCategory(ValidationError):
    kind = "invalid_category"


class InvalidRating(ValidationError):
    kind = "invalid_rating"


class InvalidPriceLevel(ValidationError):
    kind = "invalid_price_level"


class MissingField(ValidationError):
    kind = "missing_field"


class Unauthorized(AppError):
    """Missing, invalid or expired credentials."""

    kind = "unauthorized"
    status_code = 401


class InvalidSignature(Unauthorized):
    kind = "invalid_signature"


class ExpiredToken(Unauthorized):
    kind = "expired_token"


class MalformedToken(Unauthorized):
    kind = "malformed_token"


class Forbidden(AppError):
    """The acting user does not own the resource."""

    kind = "forbidden"
    status_code = 403


class NotFound(AppError):
    kind = "not_found"
    status_code = 404


class Conflict(AppError):
    """A uniqueness constraint would be violated."""

    kind = "conflict"
    status_code = 409


class InternalError(AppError):
    """Storage or token-signing failure."""
