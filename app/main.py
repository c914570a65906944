import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .util.config import get_settings
from .util.logging import configure_logging
from .util.errors import register_exception_handlers
from .database.index import engine
from .models import user, budget
from .routers.auth import router as auth_router
from .routers.budget import router as budget_router

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("app")

user.Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Budget API",
    description="Authentication and owner-scoped budgets.",
    version="0.1.0",
)

app.include_router(auth_router)
app.include_router(budget_router)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["health"])
def read_root():
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info("Starting Budget API on %s:%s", settings.host, settings.port)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
