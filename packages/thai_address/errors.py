class DatasetError(Exception):
    """Base error for gazetteer loading."""


class DatasetNotFoundError(DatasetError):
    """Raised when no geography file exists in any candidate location."""


class DatasetFetchError(DatasetError):
    """Raised when the remote geography payload cannot be fetched."""


class DatasetFormatError(DatasetError):
    """Raised when a geography payload is not a list of valid rows."""
