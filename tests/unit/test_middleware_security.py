"""Unit tests for SecurityHeadersMiddleware."""


class TestSecurityHeaders:
    async def test_headers_on_page(self, test_client):
        resp = await test_client.get("/")

        assert resp.headers.get("X-Content-Type-Options") == "nosniff"
        assert resp.headers.get("X-Frame-Options") == "DENY"
        assert resp.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"
        assert "style-src 'self' 'unsafe-inline'" in resp.headers["Content-Security-Policy"]
        assert "Cache-Control" not in resp.headers

    async def test_api_responses_not_cached(self, test_client, mock_pool):
        for path in ("/api/welcome", "/api/database/pool-info", "/health"):
            resp = await test_client.get(path)
            assert resp.headers.get("Cache-Control") == "no-store", path

    async def test_headers_on_error_response(self, test_client, no_pool):
        resp = await test_client.get("/api/database/version")

        assert resp.status_code == 503
        assert resp.headers.get("X-Content-Type-Options") == "nosniff"
