"""ASGI entrypoint for the Smart Chef API."""

from smart_chef.api.app import create_app
from smart_chef.containers import build_container

app = create_app(build_container())
