"""Tests that the service handles many simultaneous requests correctly.

Requests run as independent tasks on one event loop and share the engine's
connection pool; each holds a connection for a single operation only.
"""

import asyncio
from urllib.parse import quote

import pytest
from httpx import ASGITransport, AsyncClient

from shorturl.core.setting import Settings
from shorturl.main import create_app


@pytest.mark.asyncio
class TestConcurrentRequests:
    """Concurrent create and resolve requests."""

    async def run_against(self, app, scenario):
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                return await scenario(client)

    async def test_concurrent_creates_and_redirects(self, database_url):
        # A pool smaller than the number of requests forces tasks to wait
        settings = Settings(
            DATABASE_URL=database_url,
            DB_POOL_SIZE=2,
            DB_MAX_OVERFLOW=0,
            _env_file=None,
        )
        app = create_app(settings)
        urls = [f"https://example.com/page/{n}" for n in range(20)]

        async def scenario(client):
            created = await asyncio.gather(
                *(client.get("/url/add/" + quote(url, safe="")) for url in urls)
            )
            assert all(response.status_code == 200 for response in created)

            ids = [response.json()["gen_url"].rsplit("/", 1)[-1] for response in created]
            assert len(set(ids)) == len(urls)

            resolved = await asyncio.gather(*(client.get(f"/{short_id}") for short_id in ids))
            return [response.headers["location"] for response in resolved]

        locations = await self.run_against(app, scenario)

        assert locations == urls

    async def test_concurrent_misses_and_hits(self, settings):
        app = create_app(settings)

        async def scenario(client):
            response = await client.get("/url/add/" + quote("https://example.com/hit", safe=""))
            short_id = response.json()["gen_url"].rsplit("/", 1)[-1]

            paths = [f"/{short_id}", "/ffffffffff"] * 10
            responses = await asyncio.gather(*(client.get(path) for path in paths))
            return [(response.status_code, response.headers.get("location")) for response in responses]

        results = await self.run_against(app, scenario)

        assert results[0::2] == [(302, "https://example.com/hit")] * 10
        assert results[1::2] == [(404, None)] * 10
