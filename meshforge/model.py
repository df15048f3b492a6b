"""The model type and the interface shared by transformations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .errors import ModelError
from .geometry import Mesh


class Transform(ABC):
    """A transformation that modifies a model in place."""

    @abstractmethod
    def apply(self, model: "Model") -> None:
        """Apply the transformation, raising a ModelError on failure."""


@dataclass
class Model:
    """A named 3D model holding one mesh."""

    name: str
    mesh: Mesh = field(default_factory=Mesh)

    def apply(self, transform: Transform) -> "Model":
        """Apply a transform and return the model for chaining.

        Errors reported by the transform are ignored, so a chain of
        transforms always runs to the end.
        """
        try:
            transform.apply(self)
        except ModelError:
            pass
        return self