# asgi.py -- tiny shim so "uvicorn asgi:app" works from a checkout

import os

from greeter.server import app, configure_logging

__all__ = ["app"]

configure_logging()

# Optional local run helper:
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("asgi:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
