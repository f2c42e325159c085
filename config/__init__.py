"""mssql2mysql configuration package"""

from .secure_config import (
    ConnectionSettings,
    DumpConfig,
    get_config,
    parse_connection_string,
    sanitize_error,
)

__all__ = [
    'ConnectionSettings',
    'DumpConfig',
    'get_config',
    'parse_connection_string',
    'sanitize_error',
]
