"""
Muajam API Server.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from muajam.config import settings
from muajam.server.deps import close_channel
from muajam.server.routes import content, lexicon


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def print_banner(app: FastAPI):
    """Startup banner: dictionary order, notifier target, routes grouped by tag."""
    print("\n" + "=" * 60)
    print(f"Muajam API  redis={settings.redis_host}:{settings.redis_port}/{settings.redis_db}")
    print(f"  dictionaries: {' > '.join(settings.dictionaries)} (writes go to {settings.dictionaries[0]})")
    print(f"  notify:       {settings.notify_url or 'log only'}")

    groups: dict[str, list[tuple[str, str, str]]] = {}
    for route in app.routes:
        if isinstance(route, APIRoute):
            tag = route.tags[0] if route.tags else "root"
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            groups.setdefault(tag, []).append((route.path, methods, route.name))

    for tag in sorted(groups):
        print(f"\n  [{tag}]")
        for path, methods, name in sorted(groups[tag]):
            print(f"    {methods:6} {path:36} {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    print_banner(app)
    yield
    close_channel()


app = FastAPI(title="Muajam API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(content.router)
app.include_router(lexicon.router)


@app.get("/")
async def root():
    return {"name": "Muajam API", "version": "0.1.0", "dictionaries": settings.dictionaries}
