"""
Error taxonomy for the idea service.
Each error knows the HTTP status and the machine-readable tag returned to the caller.
"""

from typing import Any, Dict, Optional

from sidehustle.utils.constants import IDEA_COUNT


class SideHustleError(Exception):
    """Base class for errors that end a request with a JSON error payload."""

    status_code = 500
    error = "FUNCTION_INVOCATION_FAILED"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.error)
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        payload = {"error": self.error}
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload


class InvalidRequestBodyError(SideHustleError):
    status_code = 400
    error = "Invalid JSON body"


class MissingFieldsError(SideHustleError):
    status_code = 400
    error = "Missing required fields"


class ModelOutputNotJSONError(SideHustleError):
    """The generator returned text that does not parse as JSON."""

    error = "Invalid model output (not JSON)"


class ModelOutputShapeError(SideHustleError):
    """The generator returned JSON without the expected ideas array."""

    error = "Invalid model output"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or f"Expected `ideas` array with exactly {IDEA_COUNT} items.")


class InvocationFailedError(SideHustleError):
    """Wraps any unexpected failure, including upstream transport or auth errors."""
