import os

from .errors import FailurePolicy


def _policy(var: str, default: str) -> FailurePolicy:
    # Raises ValueError at import for an unknown policy name
    return FailurePolicy(os.environ.get(var, default).strip().lower())


HTTP_TIMEOUT_S = float(os.environ.get("GITPULSE_HTTP_TIMEOUT", "10"))
FETCH_DEADLINE_S = float(os.environ.get("GITPULSE_FETCH_DEADLINE", "20"))
USER_AGENT = os.environ.get("GITPULSE_USER_AGENT", "gitpulse/1.0")
API_FAILURE_POLICY = _policy("GITPULSE_API_POLICY", "strict")
DASHBOARD_FAILURE_POLICY = _policy("GITPULSE_DASHBOARD_POLICY", "degrade")
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "GITPULSE_CORS_ORIGINS",
        "https://git-pulse.vercel.app,https://localhost:5173",
    ).split(",")
    if o.strip()
]
LOG_LEVEL = os.environ.get("GITPULSE_LOG_LEVEL", "INFO").upper()
