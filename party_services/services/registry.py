"""
Service registry.

Maps each operation name the workflow engine knows to its handler, and builds
the bridge client. This is the ONE place where mock vs real bridge is chosen.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from party_services.integrations.clients.mocks.rest_bridge import MockRestBridge
from party_services.integrations.clients.real_http.rest_bridge import HttpxRestBridge
from party_services.integrations.contracts.bridge import RestBridge
from party_services.messages import MessageCollector
from party_services.services import placeholders
from party_services.services.accounts import create_commercial_account
from party_services.services.base import ServiceHandler
from party_services.services.billing import list_billing_terms
from party_services.services.parties import check_duplicate_parties, get_party, search_parties
from party_services.utils.config_loader import (
    BridgeConfig,
    PartyServicesConfig,
    configure_logging,
    load_party_services_config,
)

logger = logging.getLogger(__name__)

SERVICE_REGISTRY: Mapping[str, ServiceHandler] = MappingProxyType({
    "createCommercialAccount": create_commercial_account,
    "getParty": get_party,
    "searchParties": search_parties,
    "checkDuplicateParties": check_duplicate_parties,
    "listBillingTerms": list_billing_terms,
    "createPerson": placeholders.create_person,
    "updateParty": placeholders.update_party,
    "createPartyRelationship": placeholders.create_party_relationship,
    "listPartyRelationships": placeholders.list_party_relationships,
    "setPrimaryBillingContact": placeholders.set_primary_billing_contact,
    "deactivatePartyRelationship": placeholders.deactivate_party_relationship,
    "mergeParties": placeholders.merge_parties,
})


class UnknownServiceError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown party service '{self.name}'"


class ServiceResult(BaseModel):
    """What one service invocation hands back to the workflow engine.

    Attributes:
        ok: True when the handler added no error message.
        operation: Registry name of the operation.
        output: Output context written by the handler.
        errors: User-facing error messages, in order.
        messages: Informational messages, in order.
    """

    ok: bool
    operation: str
    output: Dict[str, Any] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)
    messages: List[str] = Field(default_factory=list)


def get_service(name: str) -> ServiceHandler:
    try:
        return SERVICE_REGISTRY[name]
    except KeyError:
        raise UnknownServiceError(name) from None


def build_bridge(cfg: BridgeConfig) -> RestBridge:
    if cfg.mode == "real_http":
        logger.info("Using real HTTP party bridge at %s", cfg.base_url)
        return HttpxRestBridge(base_url=cfg.base_url, api_key=cfg.api_key(), timeout_seconds=cfg.timeout_seconds)
    logger.info("Using mock party bridge")
    return MockRestBridge()


class ServiceRunner:
    """Runs registry operations against one bridge. Holds no per-request state."""

    def __init__(self, bridge: RestBridge) -> None:
        self.bridge = bridge

    @classmethod
    def from_config(cls, cfg: Optional[PartyServicesConfig] = None) -> "ServiceRunner":
        cfg = cfg or load_party_services_config()
        configure_logging(cfg)
        return cls(build_bridge(cfg.bridge))

    def run(self, name: str, request: Optional[Mapping[str, Any]] = None) -> ServiceResult:
        handler = get_service(name)
        messages = MessageCollector()
        output = handler(self.bridge, MappingProxyType(dict(request or {})), messages)
        if messages.errors:
            logger.info("%s finished with %d error(s)", name, len(messages.errors))
        return ServiceResult(
            ok=not messages.has_errors,
            operation=name,
            output=output,
            errors=list(messages.errors),
            messages=list(messages.messages),
        )
