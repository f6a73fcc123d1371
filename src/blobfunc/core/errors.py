class BlobOperationError(Exception):
    """Base error for failures inside an upload or delete operation."""

    client_error = False


class ValidationError(BlobOperationError):
    client_error = True


class ParseError(BlobOperationError):
    client_error = True


class StorageError(BlobOperationError):
    pass


class ConfigurationError(Exception):
    """Raised at startup when the storage backend cannot be configured."""
