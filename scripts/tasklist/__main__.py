import sys

from tasklist.app import main

sys.exit(main())
