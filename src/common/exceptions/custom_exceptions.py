"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class ValidationError(ApplicationError):
    """Exception raised when a field value is missing or malformed."""

    def __init__(self, message: str = "Invalid value", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class ParseError(ValidationError):
    """Exception raised when text cannot be parsed into a field value."""

    def __init__(self, message: str = "Could not parse value", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class InvalidArgumentError(ApplicationError):
    """Exception raised when an operation is called with arguments violating its preconditions."""

    def __init__(self, message: str = "Invalid argument", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)


class DuplicateError(ApplicationError):
    """Exception raised when an entity with the same identity is already present."""


class DuplicateProductError(DuplicateError):
    def __init__(self, message: str = "This product already exists in the ibook.") -> None:
        super().__init__(message)


class DuplicateItemError(DuplicateError):
    def __init__(self, message: str = "This item already exists in the product.") -> None:
        super().__init__(message)


class NotFoundError(ApplicationError):
    """Exception raised when a referenced entity does not exist."""


class ProductNotFoundError(NotFoundError):
    def __init__(self, message: str = "The product could not be found in the ibook.") -> None:
        super().__init__(message)


class ItemNotFoundError(NotFoundError):
    def __init__(self, message: str = "The item could not be found in the product.") -> None:
        super().__init__(message)


class StorageError(ApplicationError):
    """Exception raised for errors while reading or writing the data file."""

    def __init__(self, message: str = "Storage operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Storage Error: {message}"
