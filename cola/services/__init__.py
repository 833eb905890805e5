"""Services package exports."""

from cola.services.allocation_service import AllocationService

__all__ = ["AllocationService"]
