# config.py
# Tunable constants shared by the solver modules

from __future__ import annotations

import logging

# ==== Logging ================================================================

# Name of the logger every module writes to.
LOGGER_NAME: str = "algorithmx"

# Level applied when the logger is configured for the first time.
LOG_LEVEL: int = logging.WARNING

# ==== Solution stream ========================================================

# Maximum number of solutions the worker may get ahead of the consumer.
STREAM_BUFFER_SIZE: int = 64

# Seconds the worker waits on a full buffer before re-checking for close().
STREAM_POLL_INTERVAL: float = 0.05

# Seconds close() waits for the worker thread to finish.
STREAM_JOIN_TIMEOUT: float = 5.0

# ==== Search =================================================================

# Extra frames kept above the deepest possible search recursion.
RECURSION_HEADROOM: int = 100
