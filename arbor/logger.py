# Arbor CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for Arbor."""
import logging

logger = logging.getLogger("arbor")
