"""Exceptions raised by recordmap."""


class RecordMapError(Exception):
    """Base class for recordmap errors."""


class NotARecordError(RecordMapError, TypeError):
    """
    Raised when a conversion entry point receives something that is not a record.

    This is a usage error. The library never catches it.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"expected a dataclass instance, got {type(value).__name__}")
