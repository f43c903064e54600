import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from .routers import sync as sync_router
from .middleware.ratelimit import RateLimitMiddleware
from .middleware.logging import LoggingMiddleware
from .services.sync_engine import ENGINE_VERSION


app = FastAPI(title="sync-engine (dev)", version="1.0.0")

# Configure CORS - localhost for development, production domains for production
app_env = os.getenv("APP_ENV")
is_dev = app_env is None or app_env.lower() in {"dev", "development"}

if is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )
else:
    allowed = [
        "https://therai.co",
        "https://www.therai.co",
    ]
    preview = os.getenv("PREVIEW_ORIGIN")  # e.g., a preview deployment URL
    if preview:
        allowed.append(preview)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

app.add_middleware(RateLimitMiddleware)
app.add_middleware(LoggingMiddleware)

# Outermost, so the rate limiter and access log see the real client address.
trusted_proxies = os.getenv("TRUSTED_PROXIES")
if trusted_proxies:
    app.add_middleware(
        ProxyHeadersMiddleware,
        trusted_hosts=[h.strip() for h in trusted_proxies.split(",") if h.strip()],
    )

app.include_router(sync_router.router)


@app.get("/__health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    return {
        "message": "sync-engine dev API is running. See /__health and /docs.",
        "engine_version": ENGINE_VERSION,
    }
