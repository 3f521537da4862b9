"""Main entry point for the accessible translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from accessible_translator.coordinators import LanguageDetectionCoordinator, TranslationSessionCoordinator
from accessible_translator.core import DEFAULT_CATALOG, Session
from accessible_translator.log_config import setup_logging
from accessible_translator.services import GeminiGateway, MissingApiKeyError, SettingsManager
from accessible_translator.ui import MainWindow

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Accessible Translator")
    app.setOrganizationName("AccessibleTranslator")

    # 2. Configuration and logging
    settings = SettingsManager()
    setup_logging(settings.get_log_level())

    # 3. Window first, so configuration errors can be reported in it
    main_window = MainWindow()

    # 4. Gateway, session state and coordinators (Dependency Injection).
    # The gateway refuses to exist without credentials and the coordinators
    # reject language codes missing from the catalog.
    try:
        gateway = GeminiGateway(
            api_key=settings.get_gemini_api_key(),
            model_name=settings.get_model_name(),
            catalog=DEFAULT_CATALOG,
        )
        session = Session(target_lang=settings.get_default_target_language())
        detection = LanguageDetectionCoordinator(
            session=session,
            gateway=gateway,
            catalog=DEFAULT_CATALOG,
            debounce_ms=settings.get_detection_debounce_ms(),
            fallback_source_language=settings.get_fallback_source_language(),
        )
        coordinator = TranslationSessionCoordinator(
            gateway=gateway,
            detection_coordinator=detection,
            session=session,
            catalog=DEFAULT_CATALOG,
        )
    except MissingApiKeyError as exc:
        logger.error(exc.user_message)
        main_window.show_error("Configuration Error", exc.user_message)
        return 1
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        main_window.show_error("Configuration Error", f"Invalid configuration: {exc}")
        return 1

    # 5. Wire signals
    def render():
        main_window.render(
            coordinator.session,
            coordinator.source_languages(),
            coordinator.target_languages(),
            coordinator.output_keywords(),
        )

    main_window.mode_selected.connect(coordinator.set_mode)
    main_window.input_text_edited.connect(coordinator.set_input_text)
    main_window.source_lang_selected.connect(coordinator.set_source_lang)
    main_window.target_lang_selected.connect(coordinator.set_target_lang)
    main_window.easy_read_level_changed.connect(coordinator.set_easy_read_level)
    main_window.generate_requested.connect(coordinator.generate)
    main_window.swap_requested.connect(coordinator.swap_languages)
    main_window.image_selected.connect(coordinator.upload_image)
    coordinator.state_changed.connect(render)

    # 6. Show UI and start event loop
    render()
    main_window.show()
    logger.info("Accessible Translator started (model: %s)", gateway.model_name)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
