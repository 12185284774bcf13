"""Errors reported by the support responder."""


class ResponderError(Exception):
    """Base class for all support responder errors."""


class DefaultResponsesError(ResponderError):
    """The default responses file could not be loaded completely."""

    def __init__(self, path, message):
        super().__init__(f"{message}: {path}")
        self.path = str(path)


class DefaultResponsesMissing(DefaultResponsesError):
    """The default responses file does not exist."""

    def __init__(self, path):
        super().__init__(path, "Unable to open")


class DefaultResponsesUnreadable(DefaultResponsesError):
    """Reading the default responses file failed part way through."""

    def __init__(self, path, cause=None):
        super().__init__(path, "A problem was encountered reading")
        self.cause = cause


class KeywordTableError(ResponderError):
    """The keyword table could not be built completely."""
