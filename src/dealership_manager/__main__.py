"""Module entry point for python -m dealership_manager."""

from __future__ import annotations

from dealership_manager.app import main


if __name__ == "__main__":
    raise SystemExit(main())
