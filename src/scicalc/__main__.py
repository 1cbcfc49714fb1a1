from scicalc.cli.repl import main

raise SystemExit(main())
