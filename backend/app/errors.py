"""Domain exceptions raised by the service layer and mapped to HTTP responses in app.main."""


class PortfolioError(Exception):
    status_code = 500
    error_code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PortfolioError):
    """A required invariant would be violated or the submitted input is malformed."""

    status_code = 400
    error_code = "validation_error"


class NotFoundError(PortfolioError):
    status_code = 404
    error_code = "not_found"


class StorageError(PortfolioError):
    """A file could not be saved or deleted."""

    status_code = 500
    error_code = "storage_error"


class PersistenceError(PortfolioError):
    """The relational update failed, e.g. a referenced identifier does not exist."""

    status_code = 409
    error_code = "persistence_error"
