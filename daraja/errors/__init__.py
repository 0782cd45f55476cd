from daraja.errors.exceptions import DarajaError, ValidationError, AuthenticationError, RequestError

__all__= [
    'DarajaError',
    'ValidationError',
    'AuthenticationError',
    'RequestError',
]
