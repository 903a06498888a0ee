"""
DocuGen - Service Exceptions
============================

Error taxonomy shared by the outline synthesizer, the renderers and the
session. Every error is terminal for the operation in progress; nothing in
the core retries automatically.
"""

from typing import Optional


class ServiceException(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str, code: str = "SERVICE_ERROR", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ConfigurationError(ServiceException):
    """Invalid or incomplete configuration (e.g. missing API key)."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class ValidationError(ServiceException):
    """Invalid generation parameters, raised before any external call."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[dict] = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class SynthesisError(ServiceException):
    """The external outline generator failed or returned unusable content."""

    def __init__(self, message: str, provider: Optional[str] = None, details: Optional[dict] = None):
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, code="SYNTHESIS_ERROR", details=details)


class RenderError(ServiceException):
    """The outline cannot be rendered in the requested format."""

    def __init__(self, message: str, output_type: Optional[str] = None, details: Optional[dict] = None):
        details = details or {}
        if output_type:
            details["output_type"] = output_type
        super().__init__(message, code="RENDER_ERROR", details=details)
