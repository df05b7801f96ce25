"""Shared helpers for service handlers.

A handler receives the bridge, the read-only request context and the message
sink, and returns a fresh output dict. Handlers never raise on backend
outcomes; failures are reported through the message sink.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError

from party_services.integrations.contracts.base import RequestModel
from party_services.integrations.contracts.bridge import RestBridge
from party_services.messages import MessageCollector

logger = logging.getLogger(__name__)

ServiceHandler = Callable[[RestBridge, Mapping[str, Any], MessageCollector], Dict[str, Any]]
RequestT = TypeVar("RequestT", bound=RequestModel)


def present(value: Any) -> bool:
    """True for values a form would consider filled in."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict, set)):
        return bool(value)
    return True


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    s = str(value).strip().lower()
    if s in ("true", "1", "yes", "y", "on"):
        return True
    if s in ("false", "0", "no", "n", "off", ""):
        return False
    return bool(value)


def pick(request: Mapping[str, Any], *fields: str) -> Dict[str, Any]:
    """Copy the filled-in ``fields`` of the request context."""
    return {name: request[name] for name in fields if present(request.get(name))}


def build_request(
    model_type: Type[RequestT],
    data: Dict[str, Any],
    messages: MessageCollector,
) -> Optional[RequestT]:
    """Validate an outgoing request; on failure add one error per field and return None."""
    try:
        return model_type(**data)
    except ValidationError as exc:
        logger.warning("%s rejected before calling the backend: %s", model_type.__name__, exc)
        for err in exc.errors():
            name = ".".join(_camel(str(part)) for part in err.get("loc", ())) or model_type.__name__
            text = "is required" if err.get("type") == "missing" else err.get("msg", "is invalid")
            messages.add_error(f"{name}: {text}")
        return None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
