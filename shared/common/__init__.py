# Shared Common Library for the Sortie Recording services
# Cross-service error handling, request tracing middleware and model mixins.

__version__ = "1.0.0"

from .exceptions import (
    BaseAPIException,
    ServiceUnavailableException,
    custom_exception_handler,
)

__all__ = [
    # Version
    '__version__',

    # Exceptions
    'BaseAPIException',
    'ServiceUnavailableException',
    'custom_exception_handler',
]
