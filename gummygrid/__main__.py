from gummygrid.cli import main

raise SystemExit(main())
