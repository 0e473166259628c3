"""GET / - lookup form and rendered stats dashboard."""

from pathlib import Path

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .aggregator import fetch_all
from .config import DASHBOARD_FAILURE_POLICY
from .errors import AggregateError, NotFoundError
from .sources import PANELS
from .upstream import get_http_client

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

RETRY_MESSAGE = "Failed to fetch GitHub stats. Please try again."


def _panels(result) -> list[dict]:
    return [
        {
            "title": title,
            "url": result.urls[kind],
            "wide": wide,
            "failed": kind in result.failures,
        }
        for kind, title, wide in PANELS
    ]


@router.get("/", response_class=HTMLResponse)
async def dashboard(request: Request, username: str = "",
                    client: httpx.AsyncClient = Depends(get_http_client)):
    context = {"username": username.strip(), "result": None, "panels": [], "error": None}
    status = 200

    if context["username"]:
        try:
            result = await fetch_all(context["username"], client,
                                     policy=DASHBOARD_FAILURE_POLICY)
        except NotFoundError as exc:
            context["error"] = f"No GitHub user named '{exc.identifier}'."
            status = 404
        except AggregateError:
            context["error"] = RETRY_MESSAGE
            status = 502
        else:
            context["result"] = result
            context["panels"] = _panels(result)

    return templates.TemplateResponse(request, "dashboard.html", context, status_code=status)
