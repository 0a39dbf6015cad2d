"""PipeScope configuration loader for collector YAML text.

This module provides the ConfigLoader class that:
1. Parses raw collector configuration text with PyYAML
2. Converts parser failures into ConfigParseError with a source position
3. Builds the lenient CollectorConfig view used by the topology builder
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from pipescope.exceptions import ConfigParseError

from .models import CollectorConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loader for collector configuration text.

    The loader owns nothing but the parsing step. Validation and graph
    building both consume its output and never re-parse.

    Example:
        >>> loader = ConfigLoader()
        >>> document = loader.load_from_string("receivers:\\n  otlp: {}\\n")
        >>> document["receivers"]
        {'otlp': {}}
    """

    def load_from_string(self, raw_text: str) -> Any:
        """Parse configuration text into a plain document.

        Args:
            raw_text: YAML configuration as a string.

        Returns:
            The parsed document (usually a dict), or None for blank text.

        Raises:
            ConfigParseError: If the text is not valid YAML.
        """
        if not raw_text or not raw_text.strip():
            return None

        try:
            return yaml.safe_load(raw_text)
        except yaml.MarkedYAMLError as e:
            mark = e.problem_mark or e.context_mark
            detail = e.problem or str(e)
            if mark is not None:
                raise ConfigParseError(
                    detail, line=mark.line + 1, column=mark.column + 1
                ) from e
            raise ConfigParseError(detail) from e
        except yaml.YAMLError as e:
            raise ConfigParseError(str(e)) from e

    def load_config(self, raw_text: str) -> CollectorConfig | None:
        """Parse text and return its typed collector view.

        Args:
            raw_text: YAML configuration as a string.

        Returns:
            CollectorConfig, or None when the document is blank or not a mapping.

        Raises:
            ConfigParseError: If the text is not valid YAML.
        """
        document = self.load_from_string(raw_text)
        config = CollectorConfig.from_document(document)
        if config is None and document is not None:
            logger.debug(
                "Configuration document is a %s, not a mapping",
                type(document).__name__,
            )
        return config
