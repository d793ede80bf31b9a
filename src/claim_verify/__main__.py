"""Allow ``python -m claim_verify``."""

from .cli import main

raise SystemExit(main())
