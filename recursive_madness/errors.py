"""Project-level exception hierarchy."""


class MadnessError(Exception):
    """Base for all recursive-madness exceptions."""


class ConfigError(MadnessError):
    """Configuration could not be loaded or validated."""


class TraceError(MadnessError):
    """Writing a trace line failed."""


class UsageError(MadnessError):
    """Command-line arguments could not be understood."""
