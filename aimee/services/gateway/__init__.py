"""External AI provider gateways for Aimee."""

from aimee.services.gateway.base import (
    AIGateway,
    GatewayResult,
    VoiceProfile,
    close_ai_gateway,
    get_ai_gateway,
)
from aimee.services.gateway.hosted import HostedAIGateway
from aimee.services.gateway.offline import OfflineAIGateway

__all__ = [
    "AIGateway",
    "GatewayResult",
    "HostedAIGateway",
    "OfflineAIGateway",
    "VoiceProfile",
    "close_ai_gateway",
    "get_ai_gateway",
]
