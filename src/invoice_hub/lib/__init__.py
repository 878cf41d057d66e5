"""
Local library modules shared across Invoice Hub.

Modules:
    logs: Logging utilities
    objects: JSON serialization helpers
"""

from invoice_hub.lib import logs, objects

__all__ = ["logs", "objects"]
