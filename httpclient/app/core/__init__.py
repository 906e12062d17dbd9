"""Client-wide identifiers shared by the structured log helpers."""
from __future__ import annotations

SERVICE_NAME = "http_client"
