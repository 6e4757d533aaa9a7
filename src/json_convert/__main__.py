from json_convert.cli import main

raise SystemExit(main())
