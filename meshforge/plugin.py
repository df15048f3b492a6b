"""Plugins: named operations on models, and a registry to look them up."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .model import Model, Transform


class Plugin(ABC):
    """A named operation that modifies a model in place."""

    name: str
    description: str

    @abstractmethod
    def process(self, model: Model) -> None:
        """Process the model, raising a ModelError on failure."""


class PluginRegistry:
    """Holds plugins in registration order and finds them by name."""

    def __init__(self) -> None:
        self._plugins: List[Plugin] = []

    def __len__(self) -> int:
        return len(self._plugins)

    def register(self, plugin: Plugin) -> None:
        self._plugins.append(plugin)

    def get(self, name: str) -> Optional[Plugin]:
        """Return the first plugin registered under ``name``, or None."""
        return next((p for p in self._plugins if p.name == name), None)

    def list(self) -> List[Tuple[str, str]]:
        """Return (name, description) for every registered plugin."""
        return [(p.name, p.description) for p in self._plugins]


@dataclass
class TransformPlugin(Plugin):
    """A plugin that applies a transform."""

    name: str
    description: str
    transform: Transform

    def process(self, model: Model) -> None:
        self.transform.apply(model)


@dataclass
class CompositePlugin(Plugin):
    """A plugin that runs other plugins in sequence, stopping at the first error."""

    name: str
    description: str
    plugins: List[Plugin] = field(default_factory=list)

    def add(self, plugin: Plugin) -> "CompositePlugin":
        self.plugins.append(plugin)
        return self

    def process(self, model: Model) -> None:
        for plugin in self.plugins:
            plugin.process(model)


@dataclass
class SmoothNormalsPlugin(Plugin):
    """Recomputes vertex normals by averaging face normals."""

    name: str = "smooth_normals"
    description: str = "Smooths vertex normals by averaging face normals"

    def process(self, model: Model) -> None:
        model.mesh.compute_normals()