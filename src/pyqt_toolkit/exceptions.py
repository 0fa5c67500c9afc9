"""Toolkit exceptions."""


class ToolkitError(Exception):
    """Base class for errors raised by pyqt-toolkit."""


class NoCorrespondingClassError(ToolkitError, LookupError):
    """Raised when a class designator cannot be resolved to a Qt class."""

    def __init__(self, designator):
        self.designator = designator
        super().__init__(f"No corresponding Qt class found for {designator!r}")


class DeletedObjectError(ToolkitError, RuntimeError):
    """Raised when a wrapped Qt object has already been deleted."""


class NoSuchMethodError(ToolkitError, AttributeError):
    """Raised when a generic accessor finds no matching method or property."""


class MainThreadError(ToolkitError):
    """Raised when work cannot be handed off to the main thread."""
