"""
Domain exceptions for the Bodega POS core.

Every failure is raised synchronously with a human-readable message. The
families below map onto the outcomes a caller needs to tell apart: bad input,
uniqueness clash, missing entity, blocked operation, wrong lifecycle state and
credential mismatch.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class BodegaError(Exception):
    """Base exception for all Bodega errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for presentation layers."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(BodegaError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )
        self.field = field
        self.reason = message

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Build from the first error reported by pydantic."""
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        # ValueErrors raised by our validators keep their own message
        original = error.get("ctx", {}).get("error")
        message = str(original) if original is not None else error["msg"]
        return cls(field=field, message=message, value=error.get("input"))


# Duplicate Exceptions
class DuplicateError(BodegaError):
    """A uniqueness rule was violated."""

    pass


class DuplicateProductError(DuplicateError):
    """Another product already uses this name."""

    def __init__(self, name: str):
        super().__init__(
            f"A product named '{name}' already exists",
            code="DUPLICATE_PRODUCT",
            details={"name": name},
        )


class DuplicateSupplierNameError(DuplicateError):
    """Another supplier already uses this name."""

    def __init__(self, name: str):
        super().__init__(
            f"A supplier named '{name}' already exists",
            code="DUPLICATE_SUPPLIER_NAME",
            details={"name": name},
        )


class DuplicateSupplierRucError(DuplicateError):
    """Another supplier already uses this RUC."""

    def __init__(self, ruc: int):
        super().__init__(
            f"A supplier with RUC {ruc} already exists",
            code="DUPLICATE_SUPPLIER_RUC",
            details={"ruc": ruc},
        )


# Not Found Exceptions
class NotFoundError(BodegaError):
    """A referenced entity does not exist."""

    pass


class ProductNotFoundError(NotFoundError):
    """Product not found."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class SupplierNotFoundError(NotFoundError):
    """Supplier not found."""

    def __init__(self, supplier_id: int):
        super().__init__(
            f"Supplier not found: {supplier_id}",
            code="SUPPLIER_NOT_FOUND",
            details={"supplier_id": supplier_id},
        )


class SaleNotFoundError(NotFoundError):
    """Sale not found."""

    def __init__(self, sale_id: int):
        super().__init__(
            f"Sale not found: {sale_id}",
            code="SALE_NOT_FOUND",
            details={"sale_id": sale_id},
        )


class ReportNotFoundError(NotFoundError):
    """Report not found."""

    def __init__(self, report_id: int):
        super().__init__(
            f"Report not found: {report_id}",
            code="REPORT_NOT_FOUND",
            details={"report_id": report_id},
        )


class CashRegisterNotFoundError(NotFoundError):
    """Cash register not found."""

    def __init__(self, register_id: int):
        super().__init__(
            f"Cash register not found: {register_id}",
            code="CASH_REGISTER_NOT_FOUND",
            details={"register_id": register_id},
        )


class NoActiveCashRegisterError(NotFoundError):
    """No cash register is currently open."""

    def __init__(self) -> None:
        super().__init__(
            "There is no active cash register",
            code="NO_ACTIVE_CASH_REGISTER",
        )


class NoUserRegisteredError(NotFoundError):
    """The single system user has not been created yet."""

    def __init__(self) -> None:
        super().__init__(
            "No user is registered; create one first",
            code="NO_USER_REGISTERED",
        )


class UserNotFoundError(NotFoundError):
    """No user with the given username."""

    def __init__(self, username: str):
        super().__init__(
            f"User not found: {username}",
            code="USER_NOT_FOUND",
            details={"username": username},
        )


# Conflict Exceptions
class ConflictError(BodegaError):
    """Current system state precludes the operation."""

    pass


class ActiveCashRegisterExistsError(ConflictError):
    """A cash register is already open."""

    def __init__(self) -> None:
        super().__init__(
            "An active cash register already exists",
            code="ACTIVE_CASH_REGISTER_EXISTS",
        )


class ProductInSalesError(ConflictError):
    """Product is referenced by recorded sales."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product {product_id} is linked to recorded sales and cannot be deleted",
            code="PRODUCT_IN_SALES",
            details={"product_id": product_id},
        )


class SupplierHasProductsError(ConflictError):
    """Supplier still has products registered."""

    def __init__(self, supplier_id: int):
        super().__init__(
            f"Supplier {supplier_id} has registered products and cannot be deleted",
            code="SUPPLIER_HAS_PRODUCTS",
            details={"supplier_id": supplier_id},
        )


class UserAlreadyExistsError(ConflictError):
    """The single system user already exists."""

    def __init__(self) -> None:
        super().__init__(
            "A user is already registered",
            code="USER_ALREADY_EXISTS",
        )


# State Exceptions
class InvalidStateError(BodegaError):
    """Entity is in the wrong lifecycle state for the requested transition."""

    pass


class CashRegisterClosedError(InvalidStateError):
    """Cash register is already closed."""

    def __init__(self) -> None:
        super().__init__(
            "The cash register is closed",
            code="CASH_REGISTER_CLOSED",
        )


class CashRegisterOpenError(InvalidStateError):
    """Cash register is still open."""

    def __init__(self, register_id: int):
        super().__init__(
            f"Cash register {register_id} is still open",
            code="CASH_REGISTER_OPEN",
            details={"register_id": register_id},
        )


class ProductDeletedError(InvalidStateError):
    """Product is soft-deleted."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product {product_id} has been deleted and cannot be modified",
            code="PRODUCT_DELETED",
            details={"product_id": product_id},
        )


class ProductNotDeletedError(InvalidStateError):
    """Product is active, nothing to restore."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product {product_id} is already active",
            code="PRODUCT_NOT_DELETED",
            details={"product_id": product_id},
        )


# Authentication Exceptions
class AuthError(BodegaError):
    """Credential mismatch."""

    pass


class InvalidPasswordError(AuthError):
    """Password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            "The password is incorrect",
            code="INVALID_PASSWORD",
        )


class CurrentPasswordRequiredError(AuthError):
    """Changing the password requires the current one."""

    def __init__(self) -> None:
        super().__init__(
            "The current password is required to set a new one",
            code="CURRENT_PASSWORD_REQUIRED",
        )
