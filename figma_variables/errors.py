"""Exceptions raised by the figma-variables transformer."""


class TransformError(Exception):
    """Base class for every failure of the CSS transformation"""


class ViewportConfigError(TransformError):
    """The viewport bounds needed for fluid typography are missing or invalid"""

    def __init__(self, name, value=None, reason='is not a number'):
        self.name = name
        self.value = value
        if value is None:
            message = f"Missing required variable --{name}"
        else:
            message = f"Variable --{name} {reason}: {value!r}"
        super().__init__(message)
