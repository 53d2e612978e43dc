"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class ThreadingRejectedError(BusinessRuleViolationError):
    """Raised when a comment cannot be placed where it was asked to go."""

    def __init__(self, message: str, reasons: tuple[str, ...] = ()):
        self.reasons = reasons
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
