"""PipeScope configuration system.

- ConfigLoader: parse collector YAML text
- CollectorConfig, ServiceConfig, PipelineSpec: lenient document views
- LayoutConfig: topology graph geometry

Example:
    >>> from pipescope.config import ConfigLoader
    >>>
    >>> config = ConfigLoader().load_config(raw_text)
    >>> for name, pipeline in config.pipelines.items():
    ...     print(name, pipeline.receivers)
"""

from .loader import ConfigLoader
from .models import CollectorConfig, LayoutConfig, PipelineSpec, ServiceConfig

__all__ = [
    # Loader
    "ConfigLoader",
    # Models
    "CollectorConfig",
    "LayoutConfig",
    "PipelineSpec",
    "ServiceConfig",
]
