"""
Config Base — dataclass configuration sections and their registry.

Each section is a ``@dataclass`` subclass of ``BaseConfig`` that
declares its environment variable bindings in ``_ENV_MAP`` and
builds its default instance from the environment.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from logging import getLogger
from typing import Any, Dict, List, Optional, Type, TypeVar

logger = getLogger(__name__)

C = TypeVar("C", bound="BaseConfig")


@dataclass
class BaseConfig:
    """Common behaviour for all configuration sections."""

    _ENV_MAP = {}

    @classmethod
    def get_default_instance(cls: Type[C]) -> C:
        return cls()

    @classmethod
    def get_config_name(cls) -> str:
        raise NotImplementedError

    @classmethod
    def get_display_name(cls) -> str:
        return cls.get_config_name()

    @classmethod
    def get_description(cls) -> str:
        return ""

    @classmethod
    def get_category(cls) -> str:
        return "general"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the section's current values."""
        return asdict(self)


# ── Registry ──

_registry: Dict[str, Type[BaseConfig]] = {}
_instances: Dict[str, BaseConfig] = {}


def register_config(cls: Type[C]) -> Type[C]:
    """Class decorator adding a config section to the registry."""
    name = cls.get_config_name()
    if name in _registry and _registry[name] is not cls:
        logger.warning(f"Config section '{name}' re-registered by {cls.__name__}")
    _registry[name] = cls
    return cls


def list_configs() -> List[Type[BaseConfig]]:
    return list(_registry.values())


def get_config(name: str) -> Optional[BaseConfig]:
    """Return the cached default instance of a registered section."""
    cls = _registry.get(name)
    if cls is None:
        return None
    if name not in _instances:
        _instances[name] = cls.get_default_instance()
    return _instances[name]


def reset_configs() -> None:
    """Drop cached instances so the next lookup re-reads the environment."""
    _instances.clear()
