import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from todosphere.core.config import settings
from todosphere.core.database import engine, Base
from todosphere.core.errors import TodoSphereError
from todosphere.routers import health, auth, boards, todos, comments, views

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TodoSphere API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Erreurs
@app.exception_handler(TodoSphereError)
async def handle_domain_error(request: Request, exc: TodoSphereError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    # corps invalide = 400, comme un champ requis manquant
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Server error"})


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(auth.router)
app.include_router(boards.router)
app.include_router(views.router)
app.include_router(todos.router)
app.include_router(comments.router)
