import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine

from evtracker.core.config import Settings, load_settings
from evtracker.core.errors import register_exception_handlers
from evtracker.core.security import TokenService
from evtracker.db.session import make_engine, make_session_factory
from evtracker.api.routes.auth import router as auth_router
from evtracker.api.routes.vehicles import router as vehicles_router
from evtracker.api.routes.charges import router as charges_router
from evtracker.api.routes.users import router as users_router

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    engine = engine or make_engine(settings.database_url)

    app = FastAPI(title="EV Charge Tracker")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.tokens = TokenService(settings.jwt_secret, settings.jwt_alg, settings.jwt_expires_min)

    origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/health")
    @app.get("/api/health")
    def health(request: Request):
        try:
            with request.app.state.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            log.warning("database ping failed: %s", e)
            return JSONResponse(status_code=503, content={"status": "degraded", "database": "unavailable"})
        return {"status": "ok", "database": "ok"}

    app.include_router(auth_router)
    app.include_router(vehicles_router)
    app.include_router(charges_router)
    app.include_router(users_router)

    log.info("app ready (environment=%s)", settings.environment)
    return app


app = create_app()


def serve():
    st = app.state.settings
    uvicorn.run(app, host=st.host, port=st.port, log_level=st.log_level.lower())
