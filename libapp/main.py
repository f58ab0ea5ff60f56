"""FastAPI application entrypoint. No business logic; only wiring and error handlers."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from libapp.api.v1 import router as v1_router
from libapp.core.config import settings
from libapp.services.errors import LoginRequired

app = FastAPI(
    title="Libapp API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LoginRequired)
def login_required_handler(_request: Request, exc: LoginRequired) -> RedirectResponse:
    """Guarded routes without a session redirect instead of failing."""
    return RedirectResponse(exc.redirect_target, status_code=status.HTTP_303_SEE_OTHER)


app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Libapp API"}
