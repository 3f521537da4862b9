"""AI gateway - abstract contract and Gemini implementation."""

from accessible_translator.services.gateway.ai_gateway import SUPPORTED_IMAGE_TYPES, AIGateway
from accessible_translator.services.gateway.gemini_gateway import GeminiGateway

__all__ = [
    "AIGateway",
    "GeminiGateway",
    "SUPPORTED_IMAGE_TYPES",
]
