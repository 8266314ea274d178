"""
Error taxonomy for the service request endpoint.

Each error carries the HTTP status and the message shown to the caller.
Diagnostic detail belongs in the server log, never in ``msg``.
"""


class RelayError(Exception):
    """Base class for errors rendered as ``{"error": msg}``"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class MethodNotAllowedError(RelayError):
    """Raised for any method other than POST"""

    def __init__(self, msg="Method not allowed", status_code=405):
        super().__init__(msg=msg, status_code=status_code)


class ConfigurationError(RelayError):
    """Raised when the provider credential is not configured"""

    def __init__(self, msg="Server configuration error.", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class InvalidRequestBodyError(RelayError):
    """Raised when the body is not a usable JSON object"""

    def __init__(self, msg="Invalid request body.", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class MissingFieldError(RelayError):
    """Raised for the first required field that is missing or blank"""

    def __init__(self, field: str, status_code=400):
        self.field = field
        super().__init__(msg=f"Missing required field: {field}", status_code=status_code)


class MissingPhotosError(RelayError):
    """Raised when no photo attachments were submitted"""

    def __init__(self, msg="At least one photo is required.", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class EmailDeliveryError(RelayError):
    """
    Raised when the provider rejects the email or cannot be reached.

    Both cases share one caller-facing message; the provider status, body
    or transport error is logged where the send fails.
    """

    def __init__(self, msg="Failed to send email. Please try again later.", status_code=502):
        super().__init__(msg=msg, status_code=status_code)
