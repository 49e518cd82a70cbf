"""Integration tests for the theme stylesheet."""


class TestCurrentCss:
    async def test_tenant_theme(self, client, tenants):
        resp = await client.get("/api/themes/current.css", headers={"X-Tenant-ID": "acme"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/css")
        assert resp.headers["cache-control"] == "no-cache, no-store, must-revalidate"
        assert resp.text == (
            ":root{--color-primary:#ff0000;--color-bg:#101010;--color-text:#fafafa;}"
        )

    async def test_partial_theme_uses_defaults(self, client, tenants):
        resp = await client.get("http://globex.example.com/api/themes/current.css")
        assert resp.text == (
            ":root{--color-primary:#0ea5e9;--color-bg:#ffffff;--color-text:#111111;}"
        )

    async def test_no_tenant_gets_defaults(self, client):
        resp = await client.get("/api/themes/current.css")
        assert resp.status_code == 200
        assert "--color-primary:#2d6cdf" in resp.text

    async def test_unknown_tenant(self, client, tenants):
        resp = await client.get("/t/nowhere/api/themes/current.css")
        assert resp.status_code == 404
