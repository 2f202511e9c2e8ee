"""Allow running genpair with ``python -m genpair``."""

from .main import main

main()
