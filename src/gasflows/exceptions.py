"""Exception types raised by GasFlows models."""


class GasFlowsError(Exception):
    """Base class for all GasFlows errors."""


class CatalogError(GasFlowsError, ValueError):
    """Raised when a chemical catalog is malformed or a lookup fails."""


class GasValidationError(GasFlowsError, ValueError):
    """Raised when a gas cannot be constructed from the given inputs."""


class CompositionError(GasValidationError):
    """Raised when mass fractions do not line up with the catalog."""


class CatalogMismatchError(GasValidationError):
    """Raised when mixing gases that were built on different catalogs."""


class DegenerateFluxError(GasValidationError):
    """Raised in strict mode when a mixture has no flux to weight by."""


class ConfigurationError(GasFlowsError, ValueError):
    """Raised when a mixing configuration file cannot be interpreted."""
