class AnalysisConfigurationError(Exception):
    """Raised when bundled prompt or schema resources cannot be loaded."""
