from typing import Dict, List, Optional

from market_discounts.core.constants import DiscountErrorCode


class DiscountEngineError(Exception):
    """Base error raised to the host; carries an error code and a detail payload."""

    error_code = DiscountErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, error_code: Optional[str] = None, errors: Optional[List[Dict]] = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.errors = errors or []

    @property
    def detail(self) -> Dict:
        detail = {"error_code": self.error_code, "message": self.message}
        if self.errors:
            detail["errors"] = self.errors
        return detail


class InvalidRunInputError(DiscountEngineError):
    """Host input could not be read as a run input document."""

    error_code = DiscountErrorCode.INVALID_INPUT


class MissingDeliveryGroupsError(DiscountEngineError):
    """Delivery resolver invoked for a cart without delivery groups."""

    error_code = DiscountErrorCode.MISSING_DELIVERY_GROUPS


class InvalidSettingsError(DiscountEngineError):
    error_code = DiscountErrorCode.INVALID_SETTINGS
