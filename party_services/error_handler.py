"""Error handling helpers for party service handlers."""
from typing import Any, Dict, Optional
import logging

from party_services.integrations.contracts.outcomes import TransportFailure
from party_services.messages import MessageCollector

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_transport_fault(
        self,
        failure: TransportFailure,
        operation: str,
        messages: Optional[MessageCollector] = None,
        context: Dict[str, Any] = None,
    ) -> Dict[str, Any]:
        """Render a transport failure as the generic system error.

        When ``messages`` is None the failure is only logged (advisory
        operations never surface transport problems to the user).
        """
        logger.error("Transport fault in %s (endpoint=%s): %s", operation, failure.endpoint, failure.detail)
        message = f"System error: {failure.detail}"
        if messages is not None:
            messages.add_error(message)
        return {
            "message": message,
            "operation": operation,
            "metadata": {"error": failure.detail, "endpoint": failure.endpoint, "context": context or {}},
        }


error_handler = ErrorHandler()
