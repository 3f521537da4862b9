"""Coordinators - Orchestration layer between the UI, the session and the gateway."""

from .gateway_request import GatewayRequest
from .language_detection_coordinator import DetectionState, LanguageDetectionCoordinator
from .translation_session_coordinator import TranslationSessionCoordinator

__all__ = [
    "GatewayRequest",
    "DetectionState",
    "LanguageDetectionCoordinator",
    "TranslationSessionCoordinator",
]
