from typing import Any


class AppException(Exception):
    """Base application exception."""

    error_code: str = "APP_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class ValidationError(AppException):
    """Validation error."""

    error_code = "VALIDATION_ERROR"
    message = "Validation failed"


class PaymentValidationError(ValidationError):
    """Payment state is not ready for signing or URL generation.

    Raised before any hashing happens; the payment itself is left untouched
    so the caller can fix the offending field and retry.
    """

    error_code = "PAYMENT_VALIDATION_ERROR"
    message = "Payment validation failed"


class InvalidSumError(PaymentValidationError):
    """Payment amount is missing or not positive."""

    error_code = "INVALID_SUM"
    message = "Invalid sum"


class EmptyDescriptionError(PaymentValidationError):
    """Payment description is empty."""

    error_code = "EMPTY_DESCRIPTION"
    message = "Empty description"


class InvalidInvoiceIdError(PaymentValidationError):
    """Invoice ID is missing or not positive."""

    error_code = "INVALID_INVOICE_ID"
    message = "Invalid invoice ID"


class EmptyReceiptError(PaymentValidationError):
    """Fiscal receipt was never set."""

    error_code = "EMPTY_RECEIPT"
    message = "Empty receipt"


class InvalidParamError(PaymentValidationError):
    """Bad custom parameters, unknown culture or unknown payment type."""

    error_code = "INVALID_PARAM"
    message = "Invalid param"
