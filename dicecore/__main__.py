from dicecore.cli import main

raise SystemExit(main())
