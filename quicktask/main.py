import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse

from .config import settings
from .routers import health, parse, tasks
from .validation import TaskValidationError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Quick Task - Parser Service", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskValidationError)
async def _task_validation_error(request: Request, exc: TaskValidationError):
    logger.info("Rejected task on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.errors})


app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(parse.router, prefix="/parse", tags=["parse"])
app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])


@app.get("/")
def root():
    return {"ok": True, "service": "quicktask", "version": "0.1.0"}
