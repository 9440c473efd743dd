"""
Pydantic adapter - convert Pydantic models to JSON Schema dictionaries.

Nested and self-referencing models are emitted by Pydantic under ``$defs`` and
referenced with ``$ref``; the parser turns each reference into a lazy node.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def is_pydantic_model(obj: Any) -> bool:
    """Return True if ``obj`` is a Pydantic model class."""
    return isinstance(obj, type) and issubclass(obj, BaseModel)


def pydantic_to_schema(model: Any) -> Dict[str, Any]:
    """
    Convert a Pydantic model class to a JSON Schema dict.

    Args:
        model: Pydantic BaseModel subclass

    Returns:
        Dict: JSON Schema produced by ``model_json_schema()``

    Raises:
        ValueError: If ``model`` is not a Pydantic model class
    """
    if not is_pydantic_model(model):
        raise ValueError(f"Expected a Pydantic model class, got: {model!r}")

    schema = model.model_json_schema()
    logger.debug(f"Converted Pydantic model {model.__name__} to JSON Schema")
    return schema
