"""Module entrypoint for ``python -m modelsync.cli``."""

from modelsync.cli import main

raise SystemExit(main())
