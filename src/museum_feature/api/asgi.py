"""ASGI entrypoint for the museum feature API."""

from museum_feature.api.app import create_app
from museum_feature.containers import build_container

app = create_app(build_container())
