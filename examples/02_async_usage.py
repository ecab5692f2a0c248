"""
AsyncClient Examples

Concurrent requests with asyncio and a shared caller-owned httpx transport.
"""

import asyncio

import httpx

from request_client import AsyncClient, TimeoutError, with_timeout, with_transport

BASE_URL = "https://jsonplaceholder.typicode.com"


async def concurrent_requests():
    """Fetch several resources at once."""
    print("\n=== Concurrent GET ===")

    async with AsyncClient(BASE_URL, with_timeout((3, 10))) as client:
        responses = await asyncio.gather(*(client.get(f"/posts/{i}", out=dict) for i in range(1, 6)))

    for response in responses:
        print(f"{response.data['id']}: {response.data['title'][:40]}")


async def shared_transport():
    """Two clients sharing one connection pool."""
    print("\n=== Shared Transport ===")

    async with httpx.AsyncClient() as transport:
        posts = AsyncClient(BASE_URL, with_transport(transport))
        users = AsyncClient("https://jsonplaceholder.typicode.com/users", with_transport(transport))

        post = await posts.get("/posts/1", out=dict)
        user = await users.get("/1", out=dict)
        print(f"{user.data['name']} wrote {post.data['title']!r}")


async def timeout_handling():
    """Per-call deadline."""
    print("\n=== Timeout ===")

    async with AsyncClient("https://httpbin.org") as client:
        try:
            await client.get("/delay/5", timeout=1)
        except TimeoutError as e:
            print(f"Timed out: {e}")


async def main():
    await concurrent_requests()
    await shared_transport()
    await timeout_handling()


if __name__ == "__main__":
    asyncio.run(main())
