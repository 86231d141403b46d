# Flagstream — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagstream."""
import logging

logger: logging.Logger = logging.getLogger("flagstream")
