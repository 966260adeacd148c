"""Error types raised by the reporting engine and the snapshot loader."""


class ReportError(Exception):
    """Base class for reporting errors."""


class DataUnavailable(ReportError):
    """The snapshot could not be read or is internally inconsistent.

    Raised when the store is unreachable, the schema does not match, a record
    violates a field constraint, or a foreign key points at nothing.
    """


class InvalidParameter(ReportError):
    """A caller-supplied report parameter is outside its contract."""

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{name}': {value!r} ({reason})")
