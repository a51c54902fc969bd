"""ASGI entrypoint for the recomp tracker API."""

from recomp_tracker.api.app import create_app
from recomp_tracker.containers import build_container

app = create_app(build_container())
