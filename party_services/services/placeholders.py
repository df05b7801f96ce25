"""Operations the Party backend does not offer yet. None of them calls the bridge."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping

from party_services.integrations.contracts.bridge import RestBridge
from party_services.messages import MessageCollector

logger = logging.getLogger(__name__)


def _not_implemented(operation: str, message: str) -> Callable[..., Dict[str, Any]]:
    def handler(bridge: RestBridge, request: Mapping[str, Any], messages: MessageCollector) -> Dict[str, Any]:
        logger.info("%s called but not implemented", operation)
        messages.add_error(message)
        return {}

    handler.__name__ = operation
    return handler


create_person = _not_implemented("createPerson", "Person creation not yet implemented")
update_party = _not_implemented("updateParty", "Party update not yet implemented")
create_party_relationship = _not_implemented(
    "createPartyRelationship", "Party relationship creation not yet implemented"
)
set_primary_billing_contact = _not_implemented("setPrimaryBillingContact", "Set primary billing not yet implemented")
deactivate_party_relationship = _not_implemented(
    "deactivatePartyRelationship", "Deactivate relationship not yet implemented"
)
merge_parties = _not_implemented("mergeParties", "Party merge not yet implemented")


def list_party_relationships(
    bridge: RestBridge,
    request: Mapping[str, Any],
    messages: MessageCollector,
) -> Dict[str, Any]:
    return {"items": [], "total": 0}
