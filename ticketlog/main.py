# ticketlog/main.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from ticketlog.core.config import get_settings
from ticketlog.core.database import Base, engine
from ticketlog.core.errors import register_exception_handlers
from ticketlog.core.logging_config import configure_logging
from ticketlog.core.uploads import ensure_upload_dir

from ticketlog.activity.routes import router as activity_router
from ticketlog.auth.routes import router as auth_router
from ticketlog.setting.routes import router as setting_router
from ticketlog.ticket.routes import router as ticket_router
from ticketlog.user.routes import router as user_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("ticketlog")

Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
)

# credentials are cookies, so a wildcard origin cannot be combined with them
origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration = time.perf_counter() - start
    logger.info("%s %s -> %s (%.3fs)", request.method, request.url.path, response.status_code, duration)
    return response


# Routers
app.include_router(auth_router)
app.include_router(user_router)
app.include_router(ticket_router)
app.include_router(activity_router)
app.include_router(setting_router)

app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=ensure_upload_dir(), check_dir=False),
    name="uploads",
)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}
