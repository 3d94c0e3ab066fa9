"""
Custom exceptions for the School Records reporting engine.

Unresolvable grade references are not exceptions: they are reported
inline with an UnresolvedReference value (see schemas.py).
"""


class ReportError(Exception):
    """Base class for failures that abort a whole report."""
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidArgument(ReportError):
    """Raised when a filter or identifier is malformed."""
    
    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message)


class NotFound(ReportError):
    """Raised when a primary entity (e.g. the requested teacher) does not exist."""
    
    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class Unavailable(ReportError):
    """Raised when the storage layer fails. Never retried here."""
    
    def __init__(self, message: str = "Storage is unavailable"):
        super().__init__(message)
