from conflpy.cli import main

raise SystemExit(main())
