from loxpy.driver import main

raise SystemExit(main())
