"""Utils package exports."""

from cola.utils.logger import setup_logging

__all__ = ["setup_logging"]
