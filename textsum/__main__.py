from .cli import rank_main

raise SystemExit(rank_main())
