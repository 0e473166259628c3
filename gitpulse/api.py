"""GET /api/stats/{identifier} - aggregated stats JSON for one GitHub user."""

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from .aggregator import AggregateResult, fetch_all
from .config import API_FAILURE_POLICY
from .errors import AggregateError, FailurePolicy, NotFoundError, ValidationError
from .models import ErrorResponse, StatsPanels, StatsResponse
from .upstream import get_http_client

router = APIRouter()


def _error(status: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status, content=body.model_dump(by_alias=True, exclude_none=True))


def _error_response(exc: AggregateError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        return _error(400, ErrorResponse(error="identifier is required"))
    if isinstance(exc, NotFoundError):
        return _error(404, ErrorResponse(error="not found", identifier=exc.identifier,
                                         details=exc.message))
    return _error(500, ErrorResponse(
        error="Failed to fetch GitHub stats",
        identifier=exc.identifier,
        details=exc.message,
        upstream_status=exc.status_code,
        resource=exc.resource.value if exc.resource else None,
    ))


def _stats_body(result: AggregateResult) -> dict:
    body = StatsResponse(
        identifier=result.identifier,
        avatar_url=result.avatar_url,
        stats=StatsPanels(**{k.value: v for k, v in result.stats.items()}),
        urls={k.value: u for k, u in result.urls.items()},
        failures={k.value: m for k, m in result.failures.items()},
    )
    return body.model_dump(by_alias=True)


@router.get("/api/stats")
@router.get("/api/stats/")
async def stats_missing_identifier():
    return _error(400, ErrorResponse(error="identifier is required"))


@router.get("/api/stats/{identifier}")
@router.get("/api/github-stats/{identifier}")
async def stats(identifier: str, partial: bool = False,
                client: httpx.AsyncClient = Depends(get_http_client)):
    policy = FailurePolicy.DEGRADE if partial else API_FAILURE_POLICY
    try:
        result = await fetch_all(identifier, client, policy=policy)
    except AggregateError as exc:
        return _error_response(exc)
    return JSONResponse(content=_stats_body(result))
