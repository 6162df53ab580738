"""Errors raised while wiring the application."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting holds a value the process cannot start with."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"Invalid {setting}: {reason}")
