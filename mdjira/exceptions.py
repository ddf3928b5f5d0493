"""Exception classes for mdjira."""


class MdJiraError(Exception):
    """Base exception for mdjira."""


class ConfigError(MdJiraError):
    """Raised when the configuration file cannot be used."""

    def __init__(self, message: str, config_file: str):
        self.config_file = config_file
        super().__init__(message)

    def __str__(self):
        return f"{super().__str__()}\nConfig file: {self.config_file}"
