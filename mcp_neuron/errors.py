"""Errors raised for bad caller input. None of them are transient."""


class MCPError(ValueError):
    """Base class for every error raised by mcp_neuron."""


class InvalidWeight(MCPError):
    """A weight is not one of -1, 0, 1."""


class InvalidSignal(MCPError):
    """A signal value is not 0 or 1."""

    def __init__(self, message: str, row: int | None = None):
        super().__init__(message)
        self.row = row


class DimensionMismatch(MCPError):
    """A vector length does not match the gate's input count."""

    def __init__(self, message: str, row: int | None = None):
        super().__init__(message)
        self.row = row


class LabelCountMismatch(MCPError):
    """The number of input labels does not match the gate's input count."""


class DuplicateLabel(MCPError):
    """Two truth table columns share a label."""


class UnknownGate(MCPError, KeyError):
    """No named gate with that name."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class TooManyInputs(MCPError):
    """An exhaustive search was asked for more inputs than it can enumerate."""
