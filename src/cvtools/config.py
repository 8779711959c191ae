"""Tool defaults loaded from a YAML file."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class ToolConfig:
    """Per-tool option defaults.

    The YAML file maps tool names to option mappings::

        gaussian_blur:
          ksize_w: 5
          ksize_h: 5
          border_type: reflect
        imread:
          flags: grayscale
    """

    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    path: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> "ToolConfig":
        """Create ToolConfig from parsed YAML."""
        if not isinstance(data, dict):
            raise ValueError("Config must be a mapping of tool names to options")
        sections: dict[str, dict[str, Any]] = {}
        for tool, options in data.items():
            if options is None:
                options = {}
            if not isinstance(options, dict):
                raise ValueError(f"Options for '{tool}' must be a mapping")
            sections[_normalize(str(tool))] = {
                _normalize(str(key)): value for key, value in options.items()
            }
        return cls(sections=sections, path=path)

    @classmethod
    def from_yaml(cls, path: Path) -> "ToolConfig":
        """Load tool defaults from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a mapping of mappings.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        # An empty file is an empty config
        return cls.from_dict(data or {}, path=path)

    def defaults_for(self, tool: str) -> dict[str, Any]:
        """Return the option defaults for one tool (empty if not configured)."""
        return dict(self.sections.get(_normalize(tool), {}))


def _normalize(name: str) -> str:
    """Make YAML keys match argparse dest names (``ksize-w`` -> ``ksize_w``)."""
    return name.strip().lstrip("-").replace("-", "_")
