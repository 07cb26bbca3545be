"""Unit tests for the health endpoint."""


async def test_health_returns_ok(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_health_allows_desktop_webview_origin(client):
    origin = "tauri://localhost"
    resp = await client.get("/health", headers={"Origin": origin})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] in ("*", origin)


async def test_cors_preflight_for_send_route(client):
    resp = await client.options(
        "/ai/send",
        headers={
            "Origin": "http://localhost:1420",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert resp.status_code == 200
    assert "POST" in resp.headers["access-control-allow-methods"]
