"""Minimal example for APIClient using a mocked transport."""

import asyncio

import httpx

from objpath import APIClient


def _handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"url": str(request.url), "method": request.method})


async def main() -> None:
    """Resolve named endpoints and send a couple of requests."""
    endpoints = {
        "users": {
            "list": {"path": "users", "query": {"page": 1}},
            "detail": "users/:id",
        },
    }
    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as http_client:
        api = APIClient("https://api.example.com", endpoints, client=http_client)
        api.set_authorization_token("secret")

        print("endpoints:", list(api.endpoints))
        print("list:", await api.get(api.endpoint("users.list", {"page": 2})))
        print("update:", await api.put(api.endpoint("users.detail", {"id": 7}), {"name": "Rosario"}))


if __name__ == "__main__":
    asyncio.run(main())
