# prompthub/exceptions.py
"""
Domain errors raised by services and rendered by the handlers in main.py
as {"error": message} with the matching status code.
"""


class PromptHubError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(PromptHubError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(PromptHubError):
    status_code = 404
    default_message = "Not found"


class ValidationFailed(PromptHubError):
    status_code = 400
    default_message = "Invalid request"


class StoreFault(PromptHubError):
    """Unexpected persistence failure. The message is shown to clients, the cause only in logs."""
    status_code = 500
