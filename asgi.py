"""
ASGI entry point.

Run with:
    uvicorn asgi:app --reload

or via the `captcha-service` console script defined in pyproject.toml.
"""

from app import create_app

app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("asgi:app", host="0.0.0.0", port=8080, reload=False)
