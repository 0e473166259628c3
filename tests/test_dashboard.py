"""Server-rendered dashboard."""

from gitpulse.sources import PANELS, SubResource, build_url


def test_blank_form(api_client, upstream):
    resp = api_client.get("/")
    assert resp.status_code == 200
    assert 'name="username"' in resp.text
    assert 'role="alert"' not in resp.text
    assert upstream.calls == []


def test_whitespace_username_renders_form_only(api_client, upstream):
    resp = api_client.get("/", params={"username": "   "})
    assert resp.status_code == 200
    assert upstream.calls == []


def test_full_dashboard(api_client, avatar_url):
    resp = api_client.get("/", params={"username": "octocat"})
    assert resp.status_code == 200
    html = resp.text
    assert avatar_url in html
    assert "https://github.com/octocat" in html
    for kind, title, _ in PANELS:
        assert title in html
        assert build_url(kind, "octocat").replace("&", "&amp;") in html
    assert "unavailable</div>" in html  # hidden per-image fallbacks only
    assert 'class="placeholder">' not in html


def test_failed_panel_shows_placeholder(api_client, upstream):
    upstream.outcomes[SubResource.HEATMAP] = 500

    resp = api_client.get("/", params={"username": "octocat"})
    assert resp.status_code == 200
    assert '<div class="placeholder">Contribution Heatmap unavailable</div>' in resp.text
    assert 'src="https://ghchart.rshah.org/octocat"' not in resp.text
    assert "GitHub Stats" in resp.text


def test_not_found_message(api_client, upstream):
    upstream.outcomes[SubResource.PROFILE] = 404

    resp = api_client.get("/", params={"username": "ghost-xyz"})
    assert resp.status_code == 404
    assert "No GitHub user named &#39;ghost-xyz&#39;." in resp.text
    assert 'value="ghost-xyz"' in resp.text


def test_dot_segment_username_is_not_found(api_client, upstream):
    resp = api_client.get("/", params={"username": ".."})
    assert resp.status_code == 404
    assert "No GitHub user named &#39;..&#39;." in resp.text
    assert upstream.calls == []


def test_generic_failure_message(api_client, upstream, avatar_url):
    upstream.outcomes[SubResource.PROFILE] = 500

    resp = api_client.get("/", params={"username": "octocat"})
    assert resp.status_code == 502
    assert "Failed to fetch GitHub stats. Please try again." in resp.text
    assert avatar_url not in resp.text
