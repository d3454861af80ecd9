from fuzzycal.cli import main

raise SystemExit(main())
