import sys

from cdn_client.cli import main

sys.exit(main())
