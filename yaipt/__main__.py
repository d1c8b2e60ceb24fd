"""Entry point for running the yaipt demo service as a module."""

from __future__ import annotations

from .app import create_app
from .config import SETTINGS


def main() -> None:
    """Run the Flask development server."""
    create_app().run(host="0.0.0.0", port=SETTINGS.port, debug=False)


if __name__ == "__main__":
    main()
