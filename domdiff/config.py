"""
Config Module
Configuration for the DOM differ: ignored attributes, node classifiers and
the shape of the change markers.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, FrozenSet, Optional, Union
import json
import logging

from .errors import ConfigError
from .node_classifier import DIFF_MARKER_TAG, DIFF_MARKER_TYPE, is_content_node, is_template_node

logger = logging.getLogger(__name__)

# Bookkeeping attributes written by other pipeline stages. Their values never
# make two nodes unequal.
DEFAULT_IGNORED_ATTRIBUTES = frozenset({
    'data-ve-changed',
    'data-parsoid-changed',
    'data-parsoid-diff',
    'about',
})

DEFAULT_DIFF_ATTRIBUTE = 'data-parsoid-diff'

# Keys that can be set from plain data (JSON); predicates can only be passed in code.
DATA_KEYS = ('ignored_attributes', 'diff_attribute', 'marker_tag', 'marker_type', 'page_id')


@dataclass(frozen=True)
class DiffConfig:
    ignored_attributes: FrozenSet[str] = DEFAULT_IGNORED_ATTRIBUTES
    is_content_node: Callable[[Any], bool] = field(default=is_content_node, compare=False)
    is_template_node: Callable[[Any], bool] = field(default=is_template_node, compare=False)
    diff_attribute: str = DEFAULT_DIFF_ATTRIBUTE
    marker_tag: str = DIFF_MARKER_TAG
    marker_type: str = DIFF_MARKER_TYPE
    page_id: Optional[Union[int, str]] = None

    def __post_init__(self):
        if not isinstance(self.ignored_attributes, frozenset):
            object.__setattr__(self, 'ignored_attributes', frozenset(self.ignored_attributes))
        for name in ('diff_attribute', 'marker_tag', 'marker_type'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{name} must be a non-empty string, got {value!r}")
        if not callable(self.is_content_node) or not callable(self.is_template_node):
            raise ConfigError("Node classifiers must be callable")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DiffConfig':
        """Create a config from plain data, e.g. a parsed JSON file."""
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        unknown = set(data) - set(DATA_KEYS)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        kwargs = dict(data)
        if 'ignored_attributes' in kwargs:
            attrs = kwargs['ignored_attributes']
            if isinstance(attrs, str) or not all(isinstance(a, str) for a in attrs):
                raise ConfigError("ignored_attributes must be a list of attribute names")
            kwargs['ignored_attributes'] = frozenset(attrs)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Plain data view of the config (classifiers are left out)."""
        result = {}
        for f in fields(self):
            if f.name not in DATA_KEYS:
                continue
            value = getattr(self, f.name)
            result[f.name] = sorted(value) if f.name == 'ignored_attributes' else value
        return result


def load_config(config_path: Union[str, Path]) -> DiffConfig:
    """Read a JSON config file."""
    path = Path(config_path)
    try:
        logger.info(f"Loading config from {path}")
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading config {path}: {str(e)}", exc_info=True)
        raise ConfigError(f"Cannot load config {path}: {e}") from e
    return DiffConfig.from_dict(data)
