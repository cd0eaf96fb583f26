import hashlib
import logging
from collections.abc import Mapping
from typing import Any

# Create the library logger
logger = logging.getLogger("pagebypage")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_filters(filters: Mapping[str, Any] | None) -> str:
    """
    Redacts filter values for logging.
    Hashes the values to allow correlation without revealing search terms.
    """
    if not filters:
        return "{}"
    try:
        redacted = {}
        for k, v in filters.items():
            val_str = str(v).encode("utf-8")
            redacted[k] = hashlib.sha256(val_str).hexdigest()[:8]
        return str(redacted)
    except Exception:
        return "<redaction_failed>"
