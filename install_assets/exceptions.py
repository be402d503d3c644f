"""Exceptions related to install-assets."""

__all__ = [
    "AssetException",
    "InputException",
    "DependencyException",
    "SerializationException",
    "AssetStateError",
    "AssetDefect",
    "TemplateRenderError",
]


class AssetException(Exception):
    """Generic base exception used for this library."""


class InputException(AssetException):
    """Raised when the input files or values are not formatted as expected.

    This includes persisted asset files that exist on disk but can no longer
    be parsed.
    """


class DependencyException(AssetException):
    """Raised when a dependency of an asset could not be resolved."""

    def __init__(self, asset_name: str, message: str) -> None:
        super().__init__(f"Asset {asset_name} dependency failed: {message}")
        self.asset_name = asset_name


class SerializationException(AssetException):
    """Raised when an asset object cannot be encoded into its file."""

    def __init__(self, artifact: str, error: Exception) -> None:
        super().__init__(f"Failed to create {artifact}: {error}")
        self.artifact = artifact


class AssetStateError(AssetException):
    """Raised when an asset is used in a way its lifecycle does not allow."""


class AssetDefect(AssetException):
    """Base class for errors that indicate a programming defect.

    These are not conditions a caller can react to at runtime, e.g. a template
    that references a field the template data does not provide. Callers that
    handle AssetException broadly should check `fatal` and re-raise.
    """

    fatal = True


class TemplateRenderError(AssetDefect):
    """Raised when a template cannot be rendered with its template data."""

    def __init__(self, template_name: str | None, error: Exception) -> None:
        super().__init__(f"Template {template_name or '<string>'} failed: {error}")
        self.template_name = template_name
