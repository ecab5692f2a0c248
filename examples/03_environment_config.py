"""
Environment Configuration and Logging Examples.

Loads client options from a .env file and turns on JSON request logging.
"""

import os
import tempfile

from request_client import Client, LoggingConfig, load_options_from_env, with_logging


def from_env_file():
    """Build a client from a .env file."""
    print("\n" + "=" * 60)
    print("Load from .env")
    print("=" * 60 + "\n")

    with tempfile.TemporaryDirectory() as tmp:
        env_file = os.path.join(tmp, "client.env")
        with open(env_file, "w") as f:
            f.write("REQUEST_CLIENT_BASE_URL=https://httpbin.org\n")
            f.write("REQUEST_CLIENT_USER_AGENT=env-example/1.0\n")
            f.write("REQUEST_CLIENT_TIMEOUT_READ=10\n")
            f.write("REQUEST_CLIENT_LOG_LEVEL=DEBUG\n")

        with Client.from_env(env_file=env_file) as client:
            print(f"base_url={client.base_url} user_agent={client.user_agent} timeout={client.timeout}")
            response = client.get("/get", out=dict)
            print(f"Server saw User-Agent: {response.data['headers']['User-Agent']}")


def json_logging():
    """Request records as JSON lines on stdout."""
    print("\n" + "=" * 60)
    print("JSON logging")
    print("=" * 60 + "\n")

    base_url, options = load_options_from_env(base_url="https://httpbin.org")
    config = LoggingConfig.create(level="DEBUG", format="json")

    with Client(base_url, *options, with_logging(config)) as client:
        client.get("/get", query={"api_key": "hidden-in-logs"})


if __name__ == "__main__":
    from_env_file()
    json_logging()
