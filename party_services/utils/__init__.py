"""
Utility modules for party services
"""
from .config_loader import (
    BridgeConfig,
    PartyServicesConfig,
    configure_logging,
    load_party_services_config,
)

__all__ = [
    'BridgeConfig',
    'PartyServicesConfig',
    'configure_logging',
    'load_party_services_config',
]
