"""Application errors that have no Protean counterpart.

Input problems use ``protean.exceptions.ValidationError`` and missing records
use ``protean.exceptions.ObjectNotFoundError``; the classes below cover the rest
of the taxonomy and each one carries the HTTP status it maps to.
"""


class StorefrontError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthorized(StorefrontError):
    """No valid session accompanies the request."""

    status_code = 401


class Forbidden(StorefrontError):
    """The resource exists but belongs to someone else."""

    status_code = 403


class Conflict(StorefrontError):
    """The request clashes with the current state of the resource."""

    # The invoicing contract reports an already-invoiced order as a 400
    status_code = 400


class ServiceUnavailable(StorefrontError):
    """An external collaborator is unconfigured or unreachable."""

    status_code = 503
