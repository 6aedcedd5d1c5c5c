# jobboard/exceptions.py


class JobBoardError(Exception):
    """Base class for errors raised by the crud layer"""


class UnauthorizedError(JobBoardError):
    """Missing session, wrong role, or the caller does not own the resource"""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class DuplicateApplicationError(JobBoardError):
    def __init__(self, message: str = "You have already applied for this job"):
        super().__init__(message)


class InvalidStatusError(JobBoardError, ValueError):
    def __init__(self, status):
        super().__init__(f"Invalid application status: {status!r}")
        self.status = status


class EmailAlreadyRegisteredError(JobBoardError, ValueError):
    def __init__(self, email: str):
        super().__init__("Email already registered")
        self.email = email


class NotFoundError(JobBoardError, LookupError):
    """Mutation referenced a record that does not exist"""


class JobClosedError(JobBoardError, ValueError):
    def __init__(self, message: str = "This job is no longer accepting applications"):
        super().__init__(message)


class InvalidJobUpdateError(JobBoardError, ValueError):
    def __init__(self, field: str, reason: str):
        super().__init__(f"Job field {field!r} {reason}")
        self.field = field
