"""ASGI entrypoint for the Lingua Bud functions API."""

from linguabud_functions.api.app import create_app
from linguabud_functions.containers import build_container

app = create_app(build_container())
