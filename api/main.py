"""
prettylog demo API - example routes behind the pretty request logger
"""
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional

from prettylog.composer import LogLineComposer
from prettylog.settings import Settings, settings
from api.middleware.logging import build_composer, install_logging
from api.routes.demo import router as demo_router
from api.routes.health import router as health_router


def create_app(config: Optional[Settings] = None,
               composer: Optional[LogLineComposer] = None) -> FastAPI:
    """Create the demo app; the logger strategy is fixed here, not per request"""
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Announce configuration on startup"""
        print(f"[INFO] Starting {config.app_name}...")
        app.state.settings = config
        print(f"[OK] Access log style: {config.log_style.value}")
        print(f"[OK] Environment: {config.environment}")
        yield
        print(f"[OK] {config.app_name} stopped")

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        lifespan=lifespan
    )

    # Add logging middleware
    install_logging(app, composer or build_composer(config))

    # Include routers
    app.include_router(health_router)  # Health check and metrics endpoints
    app.include_router(demo_router)  # Example routes

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
