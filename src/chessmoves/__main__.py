"""Allow ``python -m chessmoves``."""

from chessmoves.app import main

raise SystemExit(main())
