"""Allow ``python -m repohash``."""

from repohash.cli.main import main

raise SystemExit(main())
