from __future__ import annotations

from snake_arcade.cli import main

raise SystemExit(main())
