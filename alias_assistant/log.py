"""Package logger.

Library modules log through ``logger``; only the CLI entry point
configures handlers.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("alias_assistant")
