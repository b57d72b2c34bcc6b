"""ASGI entrypoint for the menu pricing API."""

from menu_pricing.api.app import create_app
from menu_pricing.containers import build_container

app = create_app(build_container())
