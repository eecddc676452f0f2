"""
Logging setup for recruitflow.

Modules log through ``getLogger(__name__)``; applications call
``configure_logging`` once at startup.
"""

import logging
from typing import Optional, Union

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Attach a stream handler to the ``recruitflow`` logger.

    ``level`` defaults to ``WorkflowConfig.log_level``. Calling this more
    than once only updates the level.
    """
    global _configured
    if level is None:
        from recruitflow.config import get_workflow_config
        level = get_workflow_config().log_level
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger("recruitflow")
    root.setLevel(level)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        _configured = True


__all__ = ["configure_logging"]
