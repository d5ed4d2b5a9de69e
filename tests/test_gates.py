"""
The five worked-example gates, reproduced bit for bit by the single
weighted-sum/threshold rule.
"""

import pytest

from mcp_neuron import (
    GATE_PARAMETERS,
    Gate,
    MCPError,
    UnknownGate,
    and_gate,
    named_gate,
    named_truth_table,
    nand_gate,
    nor_gate,
    not_gate,
    or_gate,
)

EXPECTED = {
    "OR":   {(0, 0): 0, (0, 1): 1, (1, 0): 1, (1, 1): 1},
    "AND":  {(0, 0): 0, (0, 1): 0, (1, 0): 0, (1, 1): 1},
    "NOT":  {(0,): 1, (1,): 0},
    "NAND": {(0, 0): 1, (0, 1): 1, (1, 0): 1, (1, 1): 0},
    "NOR":  {(0, 0): 1, (0, 1): 0, (1, 0): 0, (1, 1): 0},
}


class TestNamedGates:

    @pytest.mark.parametrize("name", list(EXPECTED))
    def test_truth_table(self, name):
        table = named_truth_table(name)
        got = {r[:-1]: r[-1] for r in table.rows()}
        assert got == EXPECTED[name]
        assert table.output_label == name

    @pytest.mark.parametrize("name", list(EXPECTED))
    def test_plain_gate_with_same_parameters(self, name):
        weights, threshold = GATE_PARAMETERS[name]
        gate = Gate(weights, threshold)
        for x, y in EXPECTED[name].items():
            assert gate.decide(x) == y

    def test_parameters(self):
        assert or_gate() == Gate([1, 1], 1)
        assert and_gate() == Gate([1, 1], 2)
        assert not_gate() == Gate([-1], 0)
        assert nand_gate() == Gate([-1, -1], -1)
        assert nor_gate() == Gate([-1, -1], 0)

    def test_names(self):
        assert nand_gate().name == "NAND"
        assert str(nor_gate()) == "NOR(weights=[-1, -1], threshold=0)"

    def test_lookup_is_case_insensitive(self):
        assert named_gate("nand") == nand_gate()

    def test_unknown_gate(self):
        with pytest.raises(UnknownGate):
            named_gate("XOR")
        with pytest.raises(KeyError):
            named_gate("XOR")
        with pytest.raises(MCPError):
            named_gate("majority")

    def test_custom_labels(self):
        table = named_truth_table("AND", input_labels=["p", "q"], output_label="p∧q")
        assert table.columns == ("p", "q", "p∧q")
