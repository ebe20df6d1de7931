"""Implementações concretas de IO para IA."""

from app.infra.ai.vision_gateway_client import VisionGatewayClient

__all__ = [
    "VisionGatewayClient",
]
