# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Compleat."""
import logging

logger: logging.Logger = logging.getLogger("compleat")
