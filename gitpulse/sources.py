"""Upstream endpoints: one static URL template per sub-resource."""

from enum import Enum
from types import MappingProxyType
from urllib.parse import quote


class SubResource(str, Enum):
    PROFILE = "profile"
    STATS_CARD = "statsCard"
    STREAK_STATS = "streakStats"
    TOP_LANGUAGES = "topLanguages"
    HEATMAP = "heatmap"
    TROPHIES = "trophies"


# {identifier} is the only placeholder a template may use.
URL_TEMPLATES = MappingProxyType({
    SubResource.PROFILE: "https://api.github.com/users/{identifier}",
    SubResource.STATS_CARD: "https://github-readme-stats.vercel.app/api?username={identifier}&show_icons=true&theme=dark",
    SubResource.STREAK_STATS: "https://github-readme-streak-stats.herokuapp.com?user={identifier}&theme=dark",
    SubResource.TOP_LANGUAGES: "https://github-readme-stats-sigma-five.vercel.app/api/top-langs/?username={identifier}&layout=compact&theme=dark",
    SubResource.HEATMAP: "https://ghchart.rshah.org/{identifier}",
    SubResource.TROPHIES: "https://github-profile-trophy.vercel.app/?username={identifier}",
})

REQUEST_HEADERS = MappingProxyType({
    SubResource.PROFILE: {"Accept": "application/vnd.github+json"},
    SubResource.TROPHIES: {"Accept": "text/html"},
})

# Presenter panels, in display order: (kind, title, spans both grid columns)
PANELS = (
    (SubResource.STATS_CARD, "GitHub Stats", False),
    (SubResource.STREAK_STATS, "Streak Stats", False),
    (SubResource.TOP_LANGUAGES, "Top Languages", True),
    (SubResource.HEATMAP, "Contribution Heatmap", True),
    (SubResource.TROPHIES, "GitHub Trophies", True),
)

PANEL_KINDS = tuple(kind for kind, _, _ in PANELS)


def build_url(kind: SubResource, identifier: str) -> str:
    return URL_TEMPLATES[kind].format(identifier=quote(identifier, safe=""))


def build_urls(identifier: str) -> dict[SubResource, str]:
    """One URL per sub-resource, in table order."""
    return {kind: build_url(kind, identifier) for kind in URL_TEMPLATES}
