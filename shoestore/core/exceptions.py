"""
Application Exception Handling

AppException base class, its error categories and factory functions.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Every error carries a human-readable message for display plus a
    machine-readable code.

    Usage:
        raise AppException("Access denied", "FORBIDDEN")
        raise DataAccessError("Catalog unavailable", "CATALOG_LOAD_FAILED", {"causes": [...]})

    Error Codes:
        Validation:
            - EMPTY_CREDENTIALS

        Authentication:
            - INVALID_CREDENTIALS
            - ACCOUNT_DISABLED

        Authorization:
            - FORBIDDEN

        Data access:
            - CATALOG_LOAD_FAILED
            - CATALOG_INTEGRITY
            - LOGIN_FAILED
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_CREDENTIALS")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for display or logging."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ValidationError(AppException):
    """Local, user-correctable input problem."""


class AuthenticationError(AppException):
    """Credentials were rejected."""


class DataAccessError(AppException):
    """Connectivity or mapping failure while reading from the database."""


def cause_chain(exc: BaseException) -> List[str]:
    """
    Collect messages from an exception and its causes, outermost first.

    Follows __cause__ and then __context__ so both explicit and implicit
    chaining are reported.
    """
    messages = []
    seen = set()
    current: Optional[BaseException] = exc

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current).strip() or type(current).__name__
        messages.append(text)
        current = current.__cause__ or current.__context__

    return messages


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def empty_credentials() -> ValidationError:
    """Create empty login/password exception."""
    return ValidationError("Введите логин и пароль!", "EMPTY_CREDENTIALS")


def invalid_credentials() -> AuthenticationError:
    """Create invalid credentials exception."""
    return AuthenticationError("Неверный логин или пароль!", "INVALID_CREDENTIALS")


def account_disabled() -> AuthenticationError:
    """Create account disabled exception."""
    return AuthenticationError("Учетная запись отключена", "ACCOUNT_DISABLED")


def forbidden(message: str = "Access denied") -> AppException:
    """Create forbidden access exception."""
    return AppException(message, "FORBIDDEN")


def catalog_load_failed(exc: BaseException) -> DataAccessError:
    """
    Create catalog load exception from an underlying failure.

    The message carries the full cause chain so it can be shown as-is.
    """
    causes = cause_chain(exc)
    message = "Ошибка загрузки товаров: " + causes[0]
    if len(causes) > 1:
        message += "\n\nВнутреннее исключение: " + "\n".join(causes[1:])
    return DataAccessError(message, "CATALOG_LOAD_FAILED", {"causes": causes})


def catalog_integrity(product_id: Any, reason: str) -> DataAccessError:
    """Create exception for a product row that cannot be mapped."""
    return DataAccessError(
        f"Ошибка загрузки товаров: товар {product_id}: {reason}",
        "CATALOG_INTEGRITY",
        {"product_id": product_id, "reason": reason}
    )


def login_failed(exc: BaseException) -> DataAccessError:
    """Create exception for a database failure during login."""
    causes = cause_chain(exc)
    return DataAccessError(
        "Ошибка: " + causes[0],
        "LOGIN_FAILED",
        {"causes": causes}
    )
