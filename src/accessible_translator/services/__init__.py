"""Services layer - external integrations and configuration."""

from accessible_translator.services.errors import (
    GatewayError,
    ImageInputError,
    MissingApiKeyError,
    TranslatorError,
    UnsupportedLanguageError,
)
from accessible_translator.services.settings_manager import SettingsManager

# Gateway
from accessible_translator.services.gateway import AIGateway, GeminiGateway, SUPPORTED_IMAGE_TYPES

# Background execution
from accessible_translator.services.api_workers import GatewayWorker, WorkerSignals

# Text processing
from accessible_translator.services.text_processing import AAC_DELIMITER, split_aac_keywords

__all__ = [
	"TranslatorError",
	"GatewayError",
	"UnsupportedLanguageError",
	"MissingApiKeyError",
	"ImageInputError",
	"SettingsManager",
	"AIGateway",
	"GeminiGateway",
	"SUPPORTED_IMAGE_TYPES",
	"GatewayWorker",
	"WorkerSignals",
	"AAC_DELIMITER",
	"split_aac_keywords",
]
