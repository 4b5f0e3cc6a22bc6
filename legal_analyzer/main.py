import uvicorn

from legal_analyzer.api.app import create_app
from legal_analyzer.config.settings import Settings
from legal_analyzer.logging.logger import Log
from legal_analyzer.processor.processor import build_processor
from legal_analyzer.translation.factory import TranslatorFactory


def main() -> None:
    """Entry point: load settings -> build services -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)

    translator = TranslatorFactory.create(settings)
    processor = build_processor(settings, translator)
    app = create_app(settings, processor, translator)

    Log.info(f"Starting {settings.app_name} on port {settings.port}", env=settings.app_env)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
