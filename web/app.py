from __future__ import annotations

import os

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from api import router as api_router
from explainer.config import get_settings

WEB_DIR = os.path.dirname(os.path.abspath(__file__))

app = FastAPI(title="Code Explainer Web Interface")

# Mount static files
app.mount("/static", StaticFiles(directory=os.path.join(WEB_DIR, "static")), name="static")

# Templates
templates = Jinja2Templates(directory=os.path.join(WEB_DIR, "templates"))

# JSON endpoints the page posts to
app.include_router(api_router)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Main page with the snippet form and result panes."""
    settings = get_settings()
    return templates.TemplateResponse(request, "index.html", {"locale": settings.locale})


def create_app() -> FastAPI:
    return app
