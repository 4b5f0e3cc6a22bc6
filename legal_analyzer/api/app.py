from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from legal_analyzer.api.routes import router as documents_router
from legal_analyzer.config.settings import Settings
from legal_analyzer.processor.processor import Processor
from legal_analyzer.translation.translator import Translator


def create_app(settings: Settings, processor: Processor, translator: Translator) -> FastAPI:
    """Build the HTTP application around already constructed services."""
    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.processor = processor
    app.state.translator = translator

    @app.middleware("http")
    async def api_prefix_alias(request: Request, call_next):  # type: ignore[no-untyped-def]
        """Serve every route under `/api` as well; the web frontend prefixes its calls."""
        if request.scope.get("path", "").startswith("/api/"):
            request.scope["path"] = request.scope["path"][4:]
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "version": settings.app_version,
        }

    app.include_router(documents_router)
    return app


def _cors_origins(settings: Settings) -> list[str]:
    origins = [origin.strip() for origin in settings.cors_allowed_origins if origin.strip()]
    if settings.frontend_url and settings.frontend_url not in origins:
        origins.append(settings.frontend_url)
    return origins
