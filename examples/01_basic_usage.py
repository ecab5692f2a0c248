"""
Basic Client Usage Examples

Demonstrates GET with query, POST/PUT/DELETE with bodies and typed decoding.
"""

import json
from dataclasses import dataclass
from typing import List

from request_client import Client, HTTPError, accepting_status, with_error_checker, with_user_agent

BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class Post:
    id: int
    userId: int
    title: str
    body: str


def basic_get_request():
    """Simple GET request decoded into a dataclass."""
    print("\n=== Basic GET Request ===")

    with Client(BASE_URL) as client:
        response = client.get("/posts/1", out=Post)

    print(f"Status: {response.status_code}")
    print(f"Title: {response.data.title}")


def with_query_params():
    """GET request with query parameters."""
    print("\n=== GET with Query Params ===")

    with Client(BASE_URL) as client:
        response = client.get("/posts", query={"userId": 1}, out=List[Post])

    print(f"Found {len(response.data)} posts for user 1")


def post_with_json():
    """POST request with a JSON body."""
    print("\n=== POST with JSON ===")

    body = json.dumps({"title": "My Post", "body": "This is the content", "userId": 1})

    with Client(BASE_URL, with_user_agent("examples/1.0")) as client:
        response = client.post("/posts", body=body, out=dict)

    print(f"Status: {response.status_code}")
    print(f"Created: {response.data}")


def put_and_delete():
    """PUT then DELETE the same resource."""
    print("\n=== PUT / DELETE ===")

    with Client(BASE_URL) as client:
        body = json.dumps({"id": 1, "title": "Updated", "body": "Updated content", "userId": 1})
        response = client.put("/posts/1", body=body)
        print(f"PUT status: {response.status_code}")

        response = client.delete("/posts/1")
        print(f"DELETE status: {response.status_code}")


def handling_errors():
    """HTTPError keeps the full response."""
    print("\n=== Error Handling ===")

    with Client(BASE_URL) as client:
        try:
            client.get("/does-not-exist")
        except HTTPError as e:
            print(f"{e}; body: {e.response.body.read()[:60]!r}")

    # 404 as a normal result
    with Client(BASE_URL, with_error_checker(accepting_status(404))) as client:
        response = client.get("/does-not-exist")
        print(f"Accepted status: {response.status_code}")


if __name__ == "__main__":
    basic_get_request()
    with_query_params()
    post_with_json()
    put_and_delete()
    handling_errors()
