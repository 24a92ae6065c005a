"""ASGI entrypoint for the example site."""

from example_site.api.app import create_app
from example_site.containers import build_container

app = create_app(build_container())
