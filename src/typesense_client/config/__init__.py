"""Configuration system for the Typesense client."""

from .models import ClientConfig, Node
from .settings import Settings, load_settings

__all__ = ["ClientConfig", "Node", "Settings", "load_settings"]
