"""
Logging filters for market discounts
"""
import logging
from market_discounts.context.evaluation_context import evaluation_context


class EvaluationContextFilter(logging.Filter):
    def filter(self, record):
        record.evaluation_id = evaluation_context.evaluation_id or ''
        record.resolver = evaluation_context.resolver or ''
        record.market_id = evaluation_context.market_id or ''
        record.discount_code = evaluation_context.discount_code or ''
        return True
