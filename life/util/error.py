"""Errors raised while wiring the application together."""


class ConfigurationError(Exception):
    """A setting is missing or unsafe for the current environment.

    Raised at container build time so a misconfigured deploy fails on
    startup rather than on the first request.
    """

    def __init__(self, setting: str, reason: str = "must be configured"):
        self.setting = setting
        super().__init__(f"{setting} {reason}")
