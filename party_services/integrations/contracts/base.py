"""Base models for backend payloads (camelCase on the wire, snake_case in code)."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound="ResponseSchema")


class RequestModel(BaseModel):
    """Outgoing request body. Absent (None) fields are never sent."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ResponseSchema(BaseModel):
    """Partially populated response body.

    Every field is optional. Unknown fields are kept so records can be passed
    through to the caller untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )

    @classmethod
    def from_body(cls: Type[SchemaT], body: Optional[Mapping[str, Any]]) -> SchemaT:
        """Parse a response body, dropping fields that do not fit the schema."""
        if not isinstance(body, Mapping):
            return cls()

        data = dict(body)
        while True:
            try:
                return cls.model_validate(data)
            except ValidationError as exc:
                bad_keys = {err["loc"][0] for err in exc.errors() if err.get("loc")} & data.keys()
                if not bad_keys:
                    logger.warning("%s: unparseable response body: %s", cls.__name__, exc)
                    return cls()
                logger.warning("%s: ignoring malformed fields %s", cls.__name__, sorted(map(str, bad_keys)))
                for key in bad_keys:
                    data.pop(key, None)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


@lru_cache(maxsize=None)
def _adapter(item_type: Any) -> TypeAdapter:
    return TypeAdapter(item_type)


def keep_valid_items(value: Any, item_type: Any, label: str) -> Any:
    """Validate a list element by element, skipping the elements that do not fit.

    Anything that is not a list is returned unchanged so the field's own
    validation decides what to do with it.
    """
    if not isinstance(value, list):
        return value

    adapter = _adapter(item_type)
    kept: List[Any] = []
    for index, item in enumerate(value):
        try:
            kept.append(adapter.validate_python(item))
        except ValidationError as exc:
            logger.warning("%s: skipping malformed element %d: %s", label, index, exc.errors()[0].get("msg"))
    return kept
