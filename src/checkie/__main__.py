import sys

from checkie.app import main

sys.exit(main())
