import logging
import sys
from typing import Optional

from highlight_qa.core.config import get_settings


# Structured fields the relay attaches via `extra=`; appended to the line when present.
CONTEXT_FIELDS = ("provider", "error_kind", "category")

_configured = False


class ContextFilter(logging.Filter):
    """Render known `extra` fields as ` [key=value ...]` in `%(context)s`."""

    def filter(self, record: logging.LogRecord) -> bool:
        pairs = [
            f"{name}={getattr(record, name)}"
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        ]
        record.context = f" [{' '.join(pairs)}]" if pairs else ""
        return True


def configure_logging(level_override: Optional[str] = None) -> None:
    """
    Configure process-wide logging for the relay.

    Lines carry the provider and error kind of a failed dispatch, so an
    upstream 401 and a refused connection stay distinguishable in the logs
    even though callers see one flattened message. Idempotent.
    """
    global _configured

    if _configured:
        return

    settings = get_settings()
    log_level = (level_override or settings.log_level).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s%(context)s")
    )
    logging.basicConfig(level=log_level, handlers=[handler])

    # Every outbound call goes through httpx; its per-request lines duplicate ours.
    for noisy_logger in ("uvicorn.access", "httpx", "openai"):
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    _configured = True
