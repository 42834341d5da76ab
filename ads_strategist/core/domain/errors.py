from typing import Optional

class StrategyError(Exception):
    """Base class for strategy service errors"""

class ValidationError(StrategyError, ValueError):
    """A campaign input field is missing or malformed"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

class ParseError(StrategyError):
    """Request body could not be decoded as a JSON object"""

class UpstreamError(StrategyError):
    """The generative model call failed or returned an unusable payload"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(message)
