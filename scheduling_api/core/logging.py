"""
Process-wide logging setup.

Each record carries the correlation id and tenant of the request being served; the
request middleware sets both context variables and resets them afterwards.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional, Union

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
tenant_id_var: ContextVar[Optional[str]] = ContextVar("tenant_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(correlation_id)s] [tenant=%(tenant_id)s] %(name)s: %(message)s"

_HANDLER_NAME = "scheduling_api"


class RequestContextFilter(logging.Filter):
    """Copy the request context variables onto the record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get() or "-"
        record.tenant_id = tenant_id_var.get() or "-"
        return True


# PUBLIC_INTERFACE
def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Install the service's stdout handler on the root logger.

    Calling it again replaces the handler it installed earlier and leaves handlers
    added by others (pytest's capture, uvicorn) alone.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestContextFilter())
    root.addHandler(handler)
    root.setLevel(level)
