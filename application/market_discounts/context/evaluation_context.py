"""
Per-evaluation context using contextvars
"""
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional
import uuid


class EvaluationContext:
    def __init__(self, resolver: Optional[str] = None):
        self.evaluation_id: str | None = None
        self.resolver: str | None = resolver
        self.market_id: str | None = None
        self.discount_code: str | None = None


_evaluation_context_var: ContextVar[Optional[EvaluationContext]] = ContextVar("evaluation_context", default=None)


class _EvaluationContextProxy:
    def __getattr__(self, name):
        ctx = _evaluation_context_var.get()
        if ctx is None:
            return None
        return getattr(ctx, name)

    def __setattr__(self, name, value):
        # only writes inside an active evaluation are kept
        ctx = _evaluation_context_var.get()
        if ctx is not None:
            setattr(ctx, name, value)


evaluation_context = _EvaluationContextProxy()


def create_evaluation_id() -> str:
    eid = str(uuid.uuid4())
    evaluation_context.evaluation_id = eid
    return eid


@contextmanager
def evaluation_scope(resolver: str, discount_code: Optional[str] = None) -> Iterator[EvaluationContext]:
    """Bind a fresh context for one resolver call and restore the previous one afterwards."""
    ctx = EvaluationContext(resolver=resolver)
    ctx.discount_code = discount_code
    token = _evaluation_context_var.set(ctx)
    try:
        create_evaluation_id()
        yield ctx
    finally:
        _evaluation_context_var.reset(token)
