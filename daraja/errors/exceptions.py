class DarajaError(Exception):
    error = "Daraja error"

    def __init__(self, message, status_code=None, response_data=None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data
        self.message = message


class ValidationError(DarajaError):
    error = "Validation error"

    def __init__(self, message, field=None, errors=None):
        super().__init__(message)
        self.field = field
        self.errors = errors or {}

class AuthenticationError(DarajaError):
    error = "Authentication error"

class RequestError(DarajaError):
    error = "Request error"
