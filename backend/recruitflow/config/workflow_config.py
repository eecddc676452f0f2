"""
Workflow Configuration.

Controls where workflow records are stored, how much undo history a
builder session keeps, the default page size for listings and the
log level.
"""

from __future__ import annotations

from dataclasses import dataclass

from recruitflow.config.base import BaseConfig, get_config, register_config
from recruitflow.config.env_utils import read_env_defaults


@register_config
@dataclass
class WorkflowConfig(BaseConfig):
    """Workflow builder and store settings."""

    storage_dir: str = "workflows"
    history_limit: int = 50
    list_limit: int = 25
    log_level: str = "INFO"

    _ENV_MAP = {
        "storage_dir": "RECRUITFLOW_WORKFLOW_DIR",
        "history_limit": "RECRUITFLOW_HISTORY_LIMIT",
        "list_limit": "RECRUITFLOW_LIST_LIMIT",
        "log_level": "RECRUITFLOW_LOG_LEVEL",
    }

    @classmethod
    def get_default_instance(cls) -> "WorkflowConfig":
        defaults = read_env_defaults(cls._ENV_MAP, cls.__dataclass_fields__)
        return cls(**defaults)

    @classmethod
    def get_config_name(cls) -> str:
        return "workflow"

    @classmethod
    def get_display_name(cls) -> str:
        return "Workflow Builder"

    @classmethod
    def get_description(cls) -> str:
        return "Workflow storage directory, undo history size and listing page size."


def get_workflow_config() -> WorkflowConfig:
    return get_config(WorkflowConfig.get_config_name())
