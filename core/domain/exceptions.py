"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class BusinessException(DomainException):
    """Base exception for business-record errors."""

    pass


class BusinessNotFoundError(BusinessException):
    """
    Raised when a live business record is not found.

    Used by every write path that loads the business through
    ``BusinessRecordManager.find_one`` (update, remove).
    """

    def __init__(self, business_id=None, message: str = None):
        if message is None:
            message = (
                f"Business id {business_id} not found"
                if business_id is not None
                else "Business not found"
            )
        super().__init__(message, code="BUSINESS_NOT_FOUND")
        self.business_id = business_id


class BusinessRecordMissingError(BusinessException):
    """
    Raised when license registration targets a business row that does not exist.

    Kept apart from BusinessNotFoundError: registration looks the row up
    without the soft-delete filter and reports a different error kind.
    """

    def __init__(self, business_id=None, message: str = None):
        if message is None:
            message = f"Business with ID {business_id} not found"
        super().__init__(message, code="BUSINESS_RECORD_MISSING")
        self.business_id = business_id
