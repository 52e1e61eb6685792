"""ASGI entrypoint for the LevelUp AI service."""

from levelup_ai.api.app import create_app
from levelup_ai.containers import build_container

app = create_app(build_container())
