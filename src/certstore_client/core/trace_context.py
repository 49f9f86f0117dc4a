"""Trace id context variable for logging"""

import contextvars
import uuid

# Holds the id of the request currently in flight
trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)


def new_trace_id() -> str:
    """Generate a trace id and bind it to the current context."""
    trace_id = uuid.uuid4().hex[:16]
    trace_id_context.set(trace_id)
    return trace_id
