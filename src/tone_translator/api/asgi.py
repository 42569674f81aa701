"""ASGI entrypoint for the tone translator API."""

from tone_translator.api.app import create_app
from tone_translator.containers import build_container

app = create_app(build_container())
