import os

from dotenv import load_dotenv


class Config:
    """Base configuration"""
    BASE_URL = 'https://sandbox.safaricom.co.ke'

    # Daraja endpoint paths
    AUTH_PATH = '/oauth/v1/generate'
    STK_PUSH_PATH = '/mpesa/stkpush/v1/processrequest'

    # Seconds
    AUTH_TIMEOUT = float(os.getenv('MPESA_AUTH_TIMEOUT', '15'))
    REQUEST_TIMEOUT = float(os.getenv('MPESA_REQUEST_TIMEOUT', '30'))

    # Subtracted from the advertised token lifetime before caching
    TOKEN_EXPIRY_MARGIN = int(os.getenv('MPESA_TOKEN_EXPIRY_MARGIN', '0'))

    # Daraja validates the STK timestamp against East Africa Time (UTC+3, no DST)
    TIMESTAMP_UTC_OFFSET_HOURS = int(os.getenv('MPESA_TIMESTAMP_UTC_OFFSET', '3'))


class SandboxConfig(Config):
    """Sandbox configuration"""
    BASE_URL = 'https://sandbox.safaricom.co.ke'


class ProductionConfig(Config):
    """Production configuration"""
    BASE_URL = 'https://api.safaricom.co.ke'


class TestingConfig(Config):
    """Testing configuration"""
    BASE_URL = 'https://daraja.test'
    AUTH_TIMEOUT = 1.0
    REQUEST_TIMEOUT = 1.0
    TOKEN_EXPIRY_MARGIN = 0


config = {
    'sandbox': SandboxConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': SandboxConfig
}


def get_config(environment: str = None):
    """
    Resolve a configuration class by environment name

    Args:
        environment: 'sandbox', 'production' or 'testing'. Falls back to
            the MPESA_ENV variable, then to the sandbox. A .env file is
            loaded first when MPESA_ENV is consulted.

    Raises:
        ValueError: If the environment is unknown
    """
    if not environment:
        load_dotenv()
    name = (environment or os.getenv('MPESA_ENV') or 'default').lower()
    if name not in config:
        raise ValueError(
            f"Unknown Daraja environment '{name}'. "
            f"Use one of: {', '.join(k for k in config if k != 'default')}"
        )
    return config[name]
