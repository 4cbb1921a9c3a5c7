from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from yaml_path import DEFAULT_SEPARATOR, YamlPath
from yaml_tree import Document


@dataclass
class ContextState:
    """Typed object stored on the click context for every command."""

    config: Dict[str, Any] = field(default_factory=dict)
    verbose: bool = False
    quiet: bool = False
    documents: Dict[str, Document] = field(default_factory=dict)

    @property
    def separator(self) -> str:
        return self.config.get("separator", DEFAULT_SEPARATOR)

    @property
    def aliases(self) -> Mapping[str, str]:
        return self.config.get("aliases") or {}

    def resolve_path(self, raw: str | None) -> YamlPath:
        """Turn a command line path or alias into a :class:`YamlPath`."""

        if raw is None:
            return YamlPath()

        return YamlPath.parse(self.aliases.get(raw, raw), separator=self.separator)
