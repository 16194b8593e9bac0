"""
Core modules for the finance chat service.

This package contains:
- config: Application configuration and settings
- exceptions: Custom exception classes
- logger: Logging configuration
- normalize: Amount extraction and text normalization
- schema: Pydantic models for results, records and API payloads
"""
