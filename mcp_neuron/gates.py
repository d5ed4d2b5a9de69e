# ─────────────────────────────────────────────────────────────────────────────
#  Worked-example gates
# ─────────────────────────────────────────────────────────────────────────────
from collections import OrderedDict
from typing import Optional, Sequence

from .errors import UnknownGate
from .gate import Gate
from .truth_table import TruthTable, truth_table

# name -> (weights, threshold)
GATE_PARAMETERS = OrderedDict([
    ("OR",   ((1, 1),   1)),
    ("AND",  ((1, 1),   2)),
    ("NOT",  ((-1,),    0)),
    ("NAND", ((-1, -1), -1)),
    ("NOR",  ((-1, -1), 0)),
])

# outputs over all_signals(2); no single MCP unit produces these
XOR_OUTPUTS  = (0, 1, 1, 0)
XNOR_OUTPUTS = (1, 0, 0, 1)


def named_gate(name: str) -> Gate:
    key = name.upper()
    if key not in GATE_PARAMETERS:
        raise UnknownGate(f"unknown gate {name!r}, choose from {list(GATE_PARAMETERS)}")
    weights, threshold = GATE_PARAMETERS[key]
    return Gate(weights, threshold, name=key)


def or_gate() -> Gate:
    return named_gate("OR")


def and_gate() -> Gate:
    return named_gate("AND")


def not_gate() -> Gate:
    return named_gate("NOT")


def nand_gate() -> Gate:
    return named_gate("NAND")


def nor_gate() -> Gate:
    return named_gate("NOR")


def named_truth_table(name: str, input_labels: Optional[Sequence[str]] = None,
                      output_label: Optional[str] = None) -> TruthTable:
    """Full truth table of a named gate; the output column is named after the gate."""
    gate = named_gate(name)
    return truth_table(gate, input_labels=input_labels,
                       output_label=output_label or gate.name)
