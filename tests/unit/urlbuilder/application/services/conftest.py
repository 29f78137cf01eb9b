import pytest
from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from src.settings import Settings

BASE_URL = "https://example.com"


def create_site() -> FastAPI:
    app = FastAPI()

    @app.get("/", response_class=HTMLResponse)
    async def home():
        return "<h1>Home</h1>"

    @app.get("/about", response_class=HTMLResponse)
    async def about():
        return "<h1>About</h1>"

    @app.get("/blog/", response_class=HTMLResponse)
    async def blog():
        return "<h1>Blog</h1>"

    @app.get("/docs/guide.txt", response_class=PlainTextResponse)
    async def guide():
        return "plain guide"

    @app.get("/data")
    async def data():
        return {"ok": True}

    @app.get("/moved")
    async def moved():
        return RedirectResponse("/about")

    @app.get("/missing")
    async def missing():
        raise HTTPException(status_code=404, detail="Not found")

    return app


@pytest.fixture
def site_app() -> FastAPI:
    return create_site()


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE_URL, locales=["en"])
