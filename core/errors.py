# =============================================================================
# core/errors.py  -  Exception types raised by the core package
# =============================================================================
#
# Two tiers:
#   - LoadError is fatal.  It is raised while reading the goals document at
#     startup and the server never starts serving when it happens.
#   - The others are raised per request.  The tool server turns them into
#     MCP tool errors so the caller sees a failed call, not a text result.
#
# "Not found" and "data not available" are NOT exceptions.  They are plain
# text results produced by the dispatcher.
# =============================================================================


class TruquError(Exception):
    """Base class for every error raised by this project."""


class LoadError(TruquError):
    """The goals document could not be read, parsed or shape-checked."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot load goals data from {self.path}: {reason}")


class UnknownOperationError(TruquError):
    """A tool name that is not part of the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentError(TruquError):
    """A tool argument is missing or malformed."""


class InvalidDateError(InvalidArgumentError):
    """A startDate/endDate argument is not an ISO date."""

    def __init__(self, argument: str, value):
        self.argument = argument
        self.value = value
        super().__init__(
            f"Invalid {argument}: {value!r} (expected an ISO date, e.g. 2024-01-31)"
        )


class ConfigError(TruquError):
    """Startup configuration is missing or invalid."""
