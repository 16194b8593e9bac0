"""
Custom exceptions for the finance chat service.
"""
from typing import Any, Dict, Optional


class FinanceChatException(Exception):
    """Base exception for all finance chat errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.
        
        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(FinanceChatException):
    """Raised when user input fails validation."""
    pass


class ConfigurationError(FinanceChatException):
    """Raised when configuration is invalid."""
    pass


class ClassificationError(FinanceChatException):
    """Raised when a message cannot be run through the classifier."""
    pass


class LedgerError(FinanceChatException):
    """Raised when a ledger operation is invalid."""
    pass
