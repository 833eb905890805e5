"""Example: find the next free /21 in a partially used /16."""

from types import SimpleNamespace

from cola.services.allocation_service import AllocationService
from cola.utils.logger import setup_logging


def main() -> None:
    setup_logging("INFO")
    settings = SimpleNamespace(max_visits=10_000)
    service = AllocationService(settings)

    block = service.find_from_text(
        "10.0.0.0/16",
        "/21",
        ["10.0.0.0/18", "10.0.64.0/20", "10.0.80.0/24"],
    )

    print("Next available:", block)


if __name__ == "__main__":
    main()
