# ─────────────────────────────────────────────────────────────────────────────
#  Truth tables for MCP gates
# ─────────────────────────────────────────────────────────────────────────────
import io
from itertools import product
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .errors import DuplicateLabel, LabelCountMismatch, MCPError
from .gate import Gate, as_signal


def all_signals(m: int) -> List[Tuple[int, ...]]:
    """Return all 2**m binary input tuples, (0,…,0) first and (1,…,1) last."""
    return list(product([0, 1], repeat=m))


def default_labels(m: int, prefix: str = "x") -> List[str]:
    return [f"{prefix}{i + 1}" for i in range(m)]


def int_to_outputs(value: int, m: int) -> Tuple[int, ...]:
    """Convert an integer truth table encoding to its 2**m output bits (row 0 = LSB)."""
    return tuple((value >> i) & 1 for i in range(1 << m))


def outputs_to_int(outputs: Sequence[int]) -> int:
    return sum(int(bit) << i for i, bit in enumerate(outputs))


def _pla_name(label: str) -> str:
    return "_".join(str(label).split())


class TruthTable:
    """
    Rows of a gate's inputs together with its output, in the order supplied.

    A truth table is a snapshot: it keeps no reference to the gate that
    produced it and exposes copies only. Every row holds one 0/1 value per
    column, checked on construction.
    """

    def __init__(self, input_labels: Sequence[str], output_label: str,
                 rows: Sequence[Sequence[int]]):
        self._input_labels = tuple(input_labels)
        self._output_label = output_label
        width = len(self._input_labels) + 1
        self._rows = tuple(as_signal(r, width, row=i) for i, r in enumerate(rows))

    @property
    def input_labels(self) -> Tuple[str, ...]:
        return self._input_labels

    @property
    def output_label(self) -> str:
        return self._output_label

    @property
    def columns(self) -> Tuple[str, ...]:
        """Input labels followed by the output label."""
        return self._input_labels + (self._output_label,)

    def __len__(self):
        return len(self._rows)

    def __eq__(self, other):
        if not isinstance(other, TruthTable):
            return NotImplemented
        return self.columns == other.columns and self._rows == other._rows

    def __hash__(self):
        return hash((self.columns, self._rows))

    def __repr__(self):
        return f"TruthTable(columns={list(self.columns)}, n_rows={len(self)})"

    def __str__(self):
        return self.to_frame().to_string(index=False)

    def rows(self) -> List[Tuple[int, ...]]:
        return list(self._rows)

    def row(self, idx: int) -> Tuple[int, ...]:
        return self._rows[idx]

    def outputs(self) -> List[int]:
        return [r[-1] for r in self._rows]

    def to_frame(self) -> pd.DataFrame:
        """Return a fresh DataFrame; editing it does not touch the table."""
        return pd.DataFrame(list(self._rows), columns=list(self.columns), dtype="int64")

    def to_csv(self, path=None, sep: str = ",") -> Optional[str]:
        """
        Export as delimited text.

        Writes to *path* and returns None, or returns the text when no path
        is given.
        """
        frame = self.to_frame()
        if path is None:
            return frame.to_csv(index=False, sep=sep, lineterminator="\n")
        frame.to_csv(Path(path), index=False, sep=sep, lineterminator="\n")
        return None

    def to_pla(self) -> str:
        """Berkeley PLA text (one cube per row, single output)."""
        lines = [
            f".i {len(self.input_labels)}",
            ".o 1",
            f".ilb {' '.join(_pla_name(l) for l in self.input_labels)}",
            f".ob {_pla_name(self.output_label)}",
            f".p {len(self)}",
        ]
        for r in self._rows:
            lines.append(f"{''.join(str(v) for v in r[:-1])} {r[-1]}")
        lines.append(".e")
        return "\n".join(lines) + "\n"

    def to_int(self) -> int:
        """Encode the output column as an integer, bit i = output of row i."""
        return outputs_to_int(self.outputs())

    @classmethod
    def from_csv(cls, source, output_label: Optional[str] = None, sep: str = ","):
        """
        Read a table written by `to_csv`, from a path, a buffer or the CSV
        text itself (a string holding a newline or the separator). The last
        column is the output unless *output_label* names another one.
        """
        if isinstance(source, str) and ("\n" in source or sep in source):
            source = io.StringIO(source)
        frame = pd.read_csv(source, sep=sep, dtype="int64")
        labels = [str(c) for c in frame.columns]
        output_label = output_label or labels[-1]
        if output_label not in labels:
            raise MCPError(f"no column {output_label!r} in {labels}")
        inputs = [c for c in labels if c != output_label]
        frame = frame[inputs + [output_label]]
        rows = [tuple(int(v) for v in r) for r in frame.itertuples(index=False, name=None)]
        return cls(inputs, output_label, rows)


class TruthTableBuilder:
    """Runs a gate over an ordered set of signals and collects the results."""

    @staticmethod
    def build(gate: Gate, signals: Sequence[Sequence[int]],
              input_labels: Sequence[str], output_label: str) -> TruthTable:
        input_labels = list(input_labels)
        if len(input_labels) != gate.m:
            raise LabelCountMismatch(
                f"gate has {gate.m} input(s) but {len(input_labels)} label(s) were given"
            )
        labels = input_labels + [output_label]
        if len(set(labels)) != len(labels):
            dupes = sorted({l for l in labels if labels.count(l) > 1})
            raise DuplicateLabel(f"column labels must be distinct, repeated: {dupes}")

        # validate every row before evaluating any
        checked = [as_signal(s, gate.m, row=i) for i, s in enumerate(signals)]

        rows = [x + (gate.decide(x),) for x in checked]
        return TruthTable(input_labels, output_label, rows)


def truth_table(gate: Gate, signals: Optional[Sequence[Sequence[int]]] = None,
                input_labels: Optional[Sequence[str]] = None,
                output_label: str = "y") -> TruthTable:
    """Build a table with the full input enumeration and x1..xm labels unless given."""
    if signals is None:
        signals = all_signals(gate.m)
    if input_labels is None:
        input_labels = default_labels(gate.m)
    return TruthTableBuilder.build(gate, signals, input_labels, output_label)
