"""
This module contains the exceptions raised by binvendor.
"""


class BinvendorException(Exception):
    """
    Base class for all exceptions raised by binvendor.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(BinvendorException):
    """
    Raised when a dependency is configured in a way that cannot be provisioned,
    e.g. an unknown archive type or a missing required field.
    """


class TemplateError(BinvendorException):
    """
    Raised when a template references an undefined parameter or cannot be parsed.
    """

    def __init__(self, message: str, template: str):
        super().__init__(message)
        self.template = template


class ArchiveError(BinvendorException):
    """
    Raised when an archive is unreadable, corrupt or contains an entry that would
    be written outside of the extraction directory.
    """

    def __init__(self, message: str, archive_path: str):
        super().__init__(message)
        self.archive_path = archive_path


class DownloadError(BinvendorException):
    """
    Raised when a distribution cannot be fetched from its URI.
    """

    def __init__(self, message: str, uri: str):
        super().__init__(message)
        self.uri = uri
