"""Exceptions raised by html-creator."""


class HtmlCreatorError(Exception):
    """Base class for all html-creator errors."""


class TargetNotFoundError(HtmlCreatorError, LookupError):
    """A target-directed insert matched no node."""


class PersistError(HtmlCreatorError):
    """Rendered output could not be persisted."""


class DirectoryCreationError(PersistError):
    """The directories leading to the output file could not be created."""


class FileWriteError(PersistError):
    """The output file itself could not be written."""
