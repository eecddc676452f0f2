"""
Configuration sections for recruitflow.
"""

from recruitflow.config.base import (
    BaseConfig,
    get_config,
    list_configs,
    register_config,
    reset_configs,
)
from recruitflow.config.workflow_config import WorkflowConfig, get_workflow_config

__all__ = [
    "BaseConfig",
    "get_config",
    "list_configs",
    "register_config",
    "reset_configs",
    "WorkflowConfig",
    "get_workflow_config",
]
