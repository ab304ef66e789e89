from fastapi import FastAPI

from app.config import AppConfig, load_config
from app.features.candidates.api import admin_router as candidates_admin_router
from app.features.candidates.api import router as candidates_router
from app.features.chat.api import router as chat_router
from app.features.plans.api import admin_router as plans_admin_router
from app.features.plans.api import router as plans_router
from app.features.quiz.api import admin_router as quiz_admin_router
from app.features.quiz.api import router as quiz_router
from app.infra.completion import CompletionClient, OpenAICompletionClient
from app.infra.db import DbConfig, connect, migrate
from app.infra.seed import seed_defaults
from app.web.health import router as health_router


def create_app(cfg: AppConfig | None = None, completion: CompletionClient | None = None) -> FastAPI:
    cfg = cfg or load_config()
    conn = connect(DbConfig(path=cfg.db_path))
    migrate(conn)
    seed_defaults(conn)

    if completion is None and cfg.openai_api_key:
        completion = OpenAICompletionClient(
            api_key=cfg.openai_api_key, timeout=cfg.openai_timeout_seconds
        )

    app = FastAPI(title="Voter Compass", version="0.1.0")
    app.state.cfg = cfg
    app.state.db = conn
    app.state.completion = completion
    app.include_router(health_router)
    app.include_router(candidates_router)
    app.include_router(plans_router)
    app.include_router(quiz_router)
    app.include_router(chat_router)
    app.include_router(candidates_admin_router)
    app.include_router(plans_admin_router)
    app.include_router(quiz_admin_router)
    return app


app = create_app()
