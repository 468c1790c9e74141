"""orjson backed JSON response class.

``ORJSONResponse`` is the default response class of the application.
orjson has no native ``Decimal`` support, so money values are written as
exact JSON number literals (``0.0105``, never ``0.010499999``). Pydantic
content is dumped in python mode so its ``Decimal`` fields reach the
renderer intact.
"""

from decimal import Decimal
from typing import Any

import orjson
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def _default(obj: object) -> object:
    """Serialize types orjson does not handle natively."""
    if isinstance(obj, Decimal):
        if not obj.is_finite():
            raise TypeError(f"Non-finite Decimal is not JSON serializable: {obj}")
        return orjson.Fragment(format(obj, "f"))
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


class ORJSONResponse(JSONResponse):
    """FastAPI response class using orjson for serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:  # noqa: ANN401 - any JSON-serializable content
        """Render the content as JSON using orjson.

        Args:
            content: The content to serialize to JSON.

        Returns:
            bytes: The JSON-encoded bytes.
        """
        if isinstance(content, BaseModel):
            content = content.model_dump(by_alias=True)

        return orjson.dumps(content, default=_default, option=orjson.OPT_SORT_KEYS)
