from genetic_fn.cli import main

raise SystemExit(main())
