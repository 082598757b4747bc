from sha1stream.cli import main

raise SystemExit(main())
