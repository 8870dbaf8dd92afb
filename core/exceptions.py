from typing import Optional


class TaskServiceError(Exception):
    """A call to the remote task store failed (network, backend or bad data)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class TaskNotFoundError(TaskServiceError):
    pass


class MalformedRecordError(TaskServiceError):
    pass


class ValidationError(ValueError):
    pass
