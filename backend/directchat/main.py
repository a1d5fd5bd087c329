"""ASGI entry point: ``uvicorn directchat.main:app``."""

from directchat.fastapi_app import create_fastapi_app

app = create_fastapi_app()
