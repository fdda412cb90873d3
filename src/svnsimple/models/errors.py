"""Error hierarchy for the SVN integration."""


class SVNIntegrationError(Exception):
    """Base error for all SVN integration errors."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class PreferencesError(SVNIntegrationError):
    """Errors reading or writing preferences."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="preferences", details=details)


class PreferencesLoadError(PreferencesError):
    """A stored preferences payload could not be parsed."""

    def __init__(self, message: str, source: str, details: dict | None = None):
        super().__init__(message, details={"source": source, **(details or {})})
        self.source = source
