#!/usr/bin/env python3
"""
mssql2mysql Error Hierarchy
Canonical exception classes for the dump generator.
"""

from enum import Enum

class ErrorCode(Enum):
    UNKNOWN = "UNKNOWN_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    QUERY_ERROR = "QUERY_ERROR"

class DumpError(Exception):
    """Base class for all mssql2mysql exceptions"""
    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

class ConfigurationError(DumpError):
    """Raised when required run configuration is missing or invalid"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)

class CatalogQueryError(DumpError):
    """Raised when a catalog or row query against the source fails"""
    def __init__(self, message: str, statement: str = None, details: dict = None):
        details = dict(details or {})
        if statement is not None:
            details['statement'] = statement
        super().__init__(message, ErrorCode.QUERY_ERROR, details)
        self.statement = statement
