"""Structured logging for connection attempts."""

import json
import logging
import re
from typing import Optional

# Configure logger for connection attempts
db_logger = logging.getLogger("pginit.connect")

PASSWORD_MASK = "***"

_CREDENTIALS_RE = re.compile(r"://([^:@/]*):.*@")


def sanitize_dsn(text: str, password: Optional[str] = None) -> str:
    """Mask the password of any descriptor found in `text`.

    When the password is known every occurrence is replaced, which also
    covers usernames containing `@` or `/` that defeat the pattern match.

    Args:
        text: Descriptor, or a message that may contain one
        password: Password to mask wherever it appears

    Returns:
        Text with `user:password@` replaced by `user:***@`
    """
    if password:
        text = text.replace(password, PASSWORD_MASK)
    return _CREDENTIALS_RE.sub(rf"://\1:{PASSWORD_MASK}@", text)


def log_connection(dsn: str, success: bool, error: Optional[str] = None, duration: float = 0.0) -> None:
    """Log a connection attempt.

    Args:
        dsn: Connection descriptor, password already masked
        success: Whether the connection was opened and verified
        error: Error message if failed
        duration: Time spent opening and verifying, in seconds
    """
    log_data = {
        "event": "database_connection",
        "dsn": sanitize_dsn(dsn),
        "success": success,
        "duration_seconds": round(duration, 3),
    }

    if error:
        log_data["error"] = sanitize_dsn(error)

    if success:
        db_logger.info(json.dumps(log_data))
    else:
        db_logger.error(json.dumps(log_data))
