import sys

from checkout_scraper.main import main

sys.exit(main())
