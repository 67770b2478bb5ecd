"""
Service-layer exceptions for consistent error handling across the report service.

Input data problems are absorbed by the renderer (blank values, verbatim
dates). These exceptions cover infrastructure failures only.
"""


class ServiceError(Exception):
    """Base exception for all service-related errors."""
    pass


class ReportRenderError(ServiceError):
    """
    Raised when a finished layout cannot be serialized to PDF bytes.
    
    Callers never receive a partial document when this is raised.
    
    Example:
        ReportLab fails while writing the canvas (e.g. out of memory).
    """
    pass
