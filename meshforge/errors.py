"""Exception hierarchy for model building and transformation."""


class ModelError(Exception):
    """Base class for every error raised by the library."""

    prefix = "Model error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}: {message}")


class InvalidModelDataError(ModelError):
    """The model holds data that cannot be used."""

    prefix = "Invalid model data"


class ExportError(ModelError):
    """A model could not be written out."""

    prefix = "Export error"


class ModelImportError(ModelError):
    """A model could not be read in."""

    prefix = "Import error"


class TransformError(ModelError):
    """A transformation could not be applied."""

    prefix = "Transform error"


class PluginError(ModelError):
    """A plugin failed while processing a model."""

    prefix = "Plugin error"