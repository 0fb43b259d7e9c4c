"""Exception hierarchy for Fakenewsdle."""


class FakenewsdleError(Exception):
    """Base class for all Fakenewsdle errors."""


class MalformedInputError(FakenewsdleError):
    """Input data (CSV headers, dataset JSON) does not have the required shape."""


class MissingFileError(FakenewsdleError, FileNotFoundError):
    """A declared input file does not exist."""


class MalformedPersistedStateError(FakenewsdleError):
    """A persisted progress blob could not be parsed or validated."""


class SessionStateError(FakenewsdleError):
    """A game session action was requested in a state that does not allow it."""
