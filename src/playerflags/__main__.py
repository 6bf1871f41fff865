from playerflags.cli import main

raise SystemExit(main())
