from bm25_search.cli import main

raise SystemExit(main())
