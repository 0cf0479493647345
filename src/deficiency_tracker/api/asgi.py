"""ASGI entrypoint for the deficiency tracker API."""

from deficiency_tracker.api.app import create_app
from deficiency_tracker.containers import build_container

app = create_app(build_container())
