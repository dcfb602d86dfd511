"""Allow running the gate with ``python -m prgate``."""

from prgate.action import main

raise SystemExit(main())
