"""Fan out one identifier to every upstream endpoint and join the results.

All sub-fetches are started together and awaited as a group; results are
only inspected once every one of them has settled, so no request is left
running after ``fetch_all`` returns or raises.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field

import httpx

from .config import FETCH_DEADLINE_S
from .errors import FailurePolicy, NotFoundError, UpstreamFailure, ValidationError
from .sources import PANEL_KINDS, REQUEST_HEADERS, SubResource, build_urls
from .upstream import build_async_client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateResult:
    identifier: str
    avatar_url: str
    profile: dict
    urls: dict[SubResource, str]
    stats: dict[SubResource, str | None]
    failures: dict[SubResource, str] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not self.failures


def validate_identifier(identifier: str | None) -> str:
    cleaned = (identifier or "").strip()
    if not cleaned:
        raise ValidationError("", "identifier is required", status_code=400)
    return cleaned


async def _fetch(client: httpx.AsyncClient, kind: SubResource, url: str) -> httpx.Response:
    resp = await client.get(url, headers=REQUEST_HEADERS.get(kind))
    resp.raise_for_status()
    return resp


def _status_of(exc: BaseException) -> int | None:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None


def _describe(exc: BaseException) -> str:
    status = _status_of(exc)
    if status is not None:
        return f"HTTP {status}"
    if isinstance(exc, httpx.TimeoutException):
        return "timed out"
    return str(exc) or type(exc).__name__


def _read_profile(identifier: str, outcome) -> tuple[dict, str]:
    """Return (profile JSON, avatar URL) or raise the lookup's error."""
    if isinstance(outcome, BaseException):
        status = _status_of(outcome)
        if status == 404:
            raise NotFoundError(identifier, f"GitHub user '{identifier}' not found",
                                status_code=404, resource=SubResource.PROFILE)
        raise UpstreamFailure(identifier, f"profile lookup failed: {_describe(outcome)}",
                              status_code=status, resource=SubResource.PROFILE)
    try:
        profile = outcome.json()
    except ValueError:
        raise UpstreamFailure(identifier, "profile lookup returned invalid JSON",
                              status_code=outcome.status_code,
                              resource=SubResource.PROFILE) from None
    avatar = profile.get("avatar_url") if isinstance(profile, dict) else None
    if not isinstance(avatar, str) or not avatar:
        raise UpstreamFailure(identifier, "profile has no avatar_url",
                              status_code=outcome.status_code,
                              resource=SubResource.PROFILE)
    return profile, avatar


async def fetch_all(identifier: str, client: httpx.AsyncClient | None = None, *,
                    policy: FailurePolicy = FailurePolicy.STRICT,
                    deadline: float | None = FETCH_DEADLINE_S) -> AggregateResult:
    """Look up every sub-resource for ``identifier`` concurrently.

    Raises ``ValidationError`` for a blank identifier (no request is sent),
    ``NotFoundError`` when the profile lookup is a 404 (or, without a
    request, when the identifier is nothing but dots), and
    ``UpstreamFailure`` for anything else that goes wrong. Under
    ``FailurePolicy.DEGRADE`` failed panels are reported in
    ``AggregateResult.failures`` instead; the profile must still succeed.
    """
    identifier = validate_identifier(identifier)
    if not identifier.strip("."):
        # "." and ".." would be dot segments in the profile URL path
        raise NotFoundError(identifier, f"GitHub user '{identifier}' not found",
                            status_code=404, resource=SubResource.PROFILE)
    if client is None:
        async with build_async_client() as owned:
            return await _fan_out(owned, identifier, FailurePolicy(policy), deadline)
    return await _fan_out(client, identifier, FailurePolicy(policy), deadline)


async def _fan_out(client: httpx.AsyncClient, identifier: str,
                   policy: FailurePolicy, deadline: float | None) -> AggregateResult:
    urls = build_urls(identifier)
    kinds = list(urls)
    started = time.monotonic()

    try:
        outcomes = await asyncio.wait_for(
            asyncio.gather(*(_fetch(client, k, urls[k]) for k in kinds),
                           return_exceptions=True),
            timeout=deadline,
        )
    except asyncio.TimeoutError:
        logger.warning("%s: lookup exceeded %.1fs deadline", identifier, deadline)
        raise UpstreamFailure(identifier, f"lookup timed out after {deadline:.1f}s") from None

    results = dict(zip(kinds, outcomes))
    profile, avatar = _read_profile(identifier, results[SubResource.PROFILE])

    stats: dict[SubResource, str | None] = {}
    failures: dict[SubResource, str] = {}
    for kind in PANEL_KINDS:
        outcome = results[kind]
        if isinstance(outcome, BaseException):
            failures[kind] = _describe(outcome)
            stats[kind] = None
            logger.warning("%s: %s lookup failed: %s", identifier, kind.value, failures[kind])
        else:
            stats[kind] = outcome.text

    if failures and policy is FailurePolicy.STRICT:
        kind = next(iter(failures))
        raise UpstreamFailure(identifier, f"{kind.value} lookup failed: {failures[kind]}",
                              status_code=_status_of(results[kind]), resource=kind)

    logger.info("%s: %d/%d panels in %.2fs", identifier, len(PANEL_KINDS) - len(failures),
                len(PANEL_KINDS), time.monotonic() - started)
    return AggregateResult(
        identifier=identifier,
        avatar_url=avatar,
        profile=profile,
        urls=urls,
        stats=stats,
        failures=failures,
    )
