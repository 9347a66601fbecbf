"""Allow ``python -m fitness_app``."""
import sys

from fitness_app.main import main

sys.exit(main())
