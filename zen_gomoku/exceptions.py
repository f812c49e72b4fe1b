"""Exception hierarchy for zen_gomoku."""


class GomokuError(Exception):
    """Base class for all package errors."""


class ConfigError(GomokuError):
    """Raised when a configuration file or value cannot be used."""


class LLMClientError(GomokuError):
    """Raised by LLM clients when the provider call fails."""


class OracleError(GomokuError):
    """Raised when an oracle reply cannot be turned into a move."""
