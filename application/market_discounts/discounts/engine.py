from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

# Settings
from market_discounts.config.settings import DiscountConfigs

# Constants
from market_discounts.core.constants import ResolverName
from market_discounts.core.exceptions import DiscountEngineError, InvalidRunInputError

# Context
from market_discounts.context.evaluation_context import evaluation_scope

# DTOs
from market_discounts.dto.operations import RunResult
from market_discounts.dto.run_input import RunInput

# Resolvers
from market_discounts.discounts.base import BaseDiscountResolver
from market_discounts.discounts.cart_lines import CartLinesResolver
from market_discounts.discounts.delivery_options import DeliveryOptionsResolver
from market_discounts.discounts.selection.policy import MarketSelectionPolicy

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.engine")


class DiscountEngine:
    """Entry point the host calls once per discount evaluation."""

    def __init__(self, configs: Optional[DiscountConfigs] = None, selection_policy: Optional[MarketSelectionPolicy] = None):
        """Initialize the engine with optional dependency injection.
        Args:
            configs: settings used to build the market selection policy
            selection_policy: explicit policy; overrides the one built from settings
        """
        self.configs = configs or DiscountConfigs()
        self.selection_policy = selection_policy or MarketSelectionPolicy.from_settings(self.configs)
        self.cart_lines_resolver = CartLinesResolver(self.selection_policy)
        self.delivery_options_resolver = DeliveryOptionsResolver(self.selection_policy)

    def run_cart_lines(self, payload: Union[RunInput, Dict[str, Any]]) -> RunResult:
        return self._run(ResolverName.CART_LINES, self.cart_lines_resolver, payload)

    def run_delivery_options(self, payload: Union[RunInput, Dict[str, Any]]) -> RunResult:
        return self._run(ResolverName.DELIVERY_OPTIONS, self.delivery_options_resolver, payload)

    @staticmethod
    def parse_input(payload: Union[RunInput, Dict[str, Any]]) -> RunInput:
        """Validate a host input document.

        Raises:
            InvalidRunInputError: if the payload does not describe a run input
        """
        if isinstance(payload, RunInput):
            return payload
        try:
            return RunInput.model_validate(payload)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            logger.error(f"run_input_invalid | errors={errors}")
            raise InvalidRunInputError("Run input validation failed", errors=[
                {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                for error in errors
            ])

    def _run(self, resolver_name: str, resolver: BaseDiscountResolver, payload: Union[RunInput, Dict[str, Any]]) -> RunResult:
        run_input = self.parse_input(payload)
        with evaluation_scope(resolver_name, run_input.triggering_discount_code):
            try:
                return resolver.resolve(run_input)
            except DiscountEngineError:
                logger.error(f"{resolver_name}_engine_error", exc_info=True)
                raise
            except Exception as e:
                logger.error(f"{resolver_name}_unexpected_error | error={e}", exc_info=True)
                raise DiscountEngineError(f"Failed to resolve {resolver_name} discounts") from e
