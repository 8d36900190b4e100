"""ASGI entrypoint for the nutrition label API."""

from nutrition_label.api.app import create_app
from nutrition_label.containers import build_container

app = create_app(build_container())
