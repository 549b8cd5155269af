from docio.main import main

raise SystemExit(main())
