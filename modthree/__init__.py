"""modthree: a deterministic finite automaton engine and a binary mod-3 calculator built on it."""

import logging

__version__ = "1.0.0"

# Silent until the application calls modthree.core.logging_config.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
