class AssetPathError(Exception):
    """Base exception for asset path resolution."""


class AssetPathConfigurationError(AssetPathError):
    """Raised when asset path configuration is missing or invalid."""


class ManifestLoadError(AssetPathError):
    """Raised when a compiled asset manifest cannot be loaded."""
