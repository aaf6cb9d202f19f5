from catalog.main import main

raise SystemExit(main())
