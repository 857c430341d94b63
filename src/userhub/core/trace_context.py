"""Request trace id, shared by the middleware and the log filter."""

import contextvars

# Set per request by TraceIDMiddleware; None outside a request
trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "userhub_trace_id", default=None
)


def current_trace_id() -> str:
    """Trace id of the current request, or ``N/A`` outside one."""
    return trace_id_context.get() or "N/A"
