class CrackmesError(Exception):
    """Base class for everything the catalog client raises."""


class TokenError(CrackmesError):
    """The search page did not hand out a session cookie and a form token."""


class RetrievalError(CrackmesError):
    """A catalog request failed at the transport layer."""


class DownloadError(CrackmesError):
    """A challenge archive could not be fetched or written."""
