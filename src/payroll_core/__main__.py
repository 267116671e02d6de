from payroll_core.cli import main

raise SystemExit(main())
