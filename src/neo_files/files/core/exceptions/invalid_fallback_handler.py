"""Invalid fallback handler exception for file url resolution.

ONLY invalid fallback handler - represents a handler reference in
configuration that cannot be resolved to a callable.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import ConfigurationError


class InvalidFallbackHandler(ConfigurationError):
    """Raised when a configured fallback handler reference is invalid."""

    def __init__(
        self,
        message: str,
        handler_ref: Any = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = dict(details or {})
        if handler_ref is not None:
            enhanced_details["handler_ref"] = repr(handler_ref)

        super().__init__(
            message=message,
            error_code=error_code or "INVALID_FALLBACK_HANDLER",
            details=enhanced_details
        )

        self.handler_ref = handler_ref
