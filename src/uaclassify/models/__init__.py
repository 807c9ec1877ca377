"""Pydantic v2 models for classification results.

Re-exports all model classes for convenient import::

    from uaclassify.models import ParseResult
"""

from .parse_result import DEFAULT_DEVICE, RESULT_KEYS, ParseResult

__all__ = [
    "ParseResult",
    "DEFAULT_DEVICE",
    "RESULT_KEYS",
]
