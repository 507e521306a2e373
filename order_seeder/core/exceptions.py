"""
Error taxonomy for the random order generator

Every error is fatal to a run: core code raises, and the CLI catches
OrderSeederError once and turns it into a non-zero exit code.
"""
from typing import Any, List, Optional


class OrderSeederError(Exception):
    """Base class for all expected failures"""


class ConfigError(OrderSeederError):
    """Required settings are missing or invalid"""


class TransportError(OrderSeederError):
    """Network or HTTP-level failure reaching Shopify"""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_text: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class ApiError(OrderSeederError):
    """Shopify answered with a GraphQL `errors` envelope"""

    def __init__(self, errors: Any):
        self.errors = errors
        super().__init__(f"Shopify GraphQL errors: {self._describe(errors)}")

    @staticmethod
    def _describe(errors: Any) -> str:
        if isinstance(errors, list):
            messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
            return "; ".join(messages)
        return str(errors)


class EmptyCollectionError(OrderSeederError):
    """There is nothing eligible to pick from"""


class UserErrorsError(OrderSeederError):
    """
    A mutation returned field-level user errors

    Attributes:
        user_errors: List of UserError models (field path + message)
    """

    action = "process request"

    def __init__(self, user_errors: List[Any]):
        self.user_errors = list(user_errors)
        details = "; ".join(self._format(error) for error in self.user_errors)
        super().__init__(f"Failed to {self.action}: {details}")

    @staticmethod
    def _format(error: Any) -> str:
        field = getattr(error, "field", None)
        message = getattr(error, "message", str(error))
        if field:
            return f"{'.'.join(field)}: {message}"
        return message

    @property
    def messages(self) -> List[str]:
        return [getattr(error, "message", str(error)) for error in self.user_errors]


class OrderCreationError(UserErrorsError):
    """draftOrderCreate returned user errors"""

    action = "create draft order"


class OrderCompletionError(UserErrorsError):
    """draftOrderComplete returned user errors"""

    action = "complete draft order"


class InvariantViolationError(OrderSeederError):
    """Shopify reported success but the expected payload is missing"""
