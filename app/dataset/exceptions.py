class DatasetError(Exception):
    """Raised when the reference dataset cannot be read."""


class DatasetNotFoundError(DatasetError, FileNotFoundError):
    """Raised when the reference dataset path does not exist."""
