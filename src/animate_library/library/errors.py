"""
Exceptions raised while building and querying an asset library.
"""


class LibraryError(Exception):
    """Base class for asset library errors."""
    pass


class SchemaError(LibraryError):
    """Raised when an export document or one of its records is malformed."""
    pass


class NotFoundError(LibraryError, LookupError):
    """Raised when an asset id is not present in the library."""

    def __init__(self, asset_id: object):
        super().__init__(f"Asset not found: {asset_id!r}")
        self.asset_id = asset_id


class UseAfterTeardownError(LibraryError, RuntimeError):
    """Raised when a library is queried after teardown()."""
    pass
