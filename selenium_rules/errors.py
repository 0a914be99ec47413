"""Exceptions raised by the rule chain and its rules."""


class SeleniumRuleError(Exception):
    pass


class ConfigurationError(SeleniumRuleError, ValueError):
    """A required collaborator or setting is missing or invalid."""


class ProvisioningError(SeleniumRuleError):
    """The driver factory raised or returned no driver."""


class NotReadyError(SeleniumRuleError, RuntimeError):
    """A driver or chain was used outside the window it is valid in."""


class DiagnosticCaptureError(SeleniumRuleError):
    """
    Screenshot or test logging failed during a lifecycle phase.

    Never replaces the test's own outcome.
    """
