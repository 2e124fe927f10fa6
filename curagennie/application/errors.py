class AIProviderError(Exception):
    """The generative model call failed or returned an unusable reply."""


class DirectoryLookupError(Exception):
    """The doctor directory could not be queried."""


class MedicineLookupError(Exception):
    """Medicine information could not be produced."""


class MedicineLookupUnavailable(MedicineLookupError):
    """No generative model is configured, so medicine lookups are disabled."""
