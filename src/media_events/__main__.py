import sys

from media_events.main import main

sys.exit(main())
