"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repairshop.api.errors import register_exception_handlers
from repairshop.api.routes import router as api_router
from repairshop.core.config import Settings, get_settings
from repairshop.core.database import build_engine, build_session_factory
from repairshop.services.tokens import TokenService


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application around one settings object.

    The engine, session factory and token service are created here and kept on
    app.state; handlers never read the environment themselves. A missing
    JWT_SECRET fails here, at startup.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Repair Shop API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.token_service = TokenService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Repair Shop API"}

    return app


app = create_app()
