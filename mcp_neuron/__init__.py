"""McCulloch-Pitts neurons as logic gates, with truth tables."""
from .errors import (
    DimensionMismatch,
    DuplicateLabel,
    InvalidSignal,
    InvalidWeight,
    LabelCountMismatch,
    MCPError,
    TooManyInputs,
    UnknownGate,
)
from .gate import Gate
from .gates import (
    GATE_PARAMETERS,
    XNOR_OUTPUTS,
    XOR_OUTPUTS,
    and_gate,
    named_gate,
    named_truth_table,
    nand_gate,
    nor_gate,
    not_gate,
    or_gate,
)
from .separability import is_realizable, is_separable, realizable_functions, realizations
from .truth_table import TruthTable, TruthTableBuilder, all_signals, truth_table

__version__ = "0.1.0"
