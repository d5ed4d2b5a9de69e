import pytest

from mcp_neuron.cli import build_parser, main


class TestTable:

    def test_named_gate(self, capsys):
        assert main(["table", "--gate", "nand"]) == 0
        out = capsys.readouterr().out
        assert "NAND(weights=[-1, -1], threshold=-1)" in out
        assert out.splitlines()[1].split() == ["x1", "x2", "NAND"]

    def test_custom_gate_with_exports(self, tmp_path, capsys):
        csv_path = tmp_path / "t.csv"
        pla_path = tmp_path / "t.pla"
        rc = main(["table", "--weights", "1", "1", "--threshold", "1",
                   "--labels", "a", "b", "--output-label", "or",
                   "--csv", str(csv_path), "--pla", str(pla_path)])
        assert rc == 0
        assert csv_path.read_text().splitlines() == ["a,b,or", "0,0,0", "0,1,1", "1,0,1", "1,1,1"]
        assert pla_path.read_text().splitlines()[-1] == ".e"
        assert "✓ saved" in capsys.readouterr().out

    def test_missing_threshold(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["table", "--weights", "1", "1"])
        assert exc.value.code == 2
        assert "--threshold" in capsys.readouterr().err

    def test_invalid_weight(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["table", "--weights", "2", "1", "--threshold", "1"])
        assert exc.value.code == 2
        assert "weight 0" in capsys.readouterr().err

    def test_unwritable_export(self, tmp_path):
        target = tmp_path / "missing" / "t.pla"
        with pytest.raises(SystemExit) as exc:
            main(["table", "--gate", "OR", "--pla", str(target)])
        assert exc.value.code == 2

    def test_label_count(self):
        with pytest.raises(SystemExit):
            main(["table", "--gate", "AND", "--labels", "a"])


class TestRealize:

    def test_and(self, capsys):
        assert main(["realize", "0", "0", "0", "1"]) == 0
        assert capsys.readouterr().out.startswith("✓")

    def test_and_lists_gate(self, capsys):
        main(["realize", "0001"])
        assert "Gate(weights=[1, 1], threshold=2)" in capsys.readouterr().out

    def test_xor(self, capsys):
        assert main(["realize", "0,1,1,0"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("✗")
        assert "linearly separable: False" in out

    def test_from_csv(self, tmp_path, capsys):
        path = tmp_path / "nor.csv"
        main(["table", "--gate", "NOR", "--csv", str(path)])
        capsys.readouterr()
        assert main(["realize", "--csv", str(path)]) == 0
        assert "Gate(weights=[-1, -1], threshold=0)" in capsys.readouterr().out

    def test_single_spaced_argument(self, capsys):
        assert main(["realize", "0 1 1 1"]) == 0
        assert "Gate(weights=[1, 1], threshold=1)" in capsys.readouterr().out

    def test_missing_csv(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["realize", "--csv", str(tmp_path / "nope.csv")])
        assert exc.value.code == 2

    def test_bad_digits(self):
        with pytest.raises(SystemExit):
            main(["realize", "0", "2"])


class TestCensus:

    def test_two_inputs(self, capsys):
        assert main(["census", "--n-input", "2", "--separable"]) == 0
        out = capsys.readouterr().out
        assert "16 Boolean functions" in out
        assert "14 realizable" in out
        assert "14 linearly separable" in out

    def test_sampled_above_exact_limit(self, capsys):
        rc = main(["census", "--n-input", "4", "--separable", "--sample", "20", "--seed", "1"])
        assert rc == 0
        out = capsys.readouterr().out
        assert "proportion linearly separable ≈" in out
        assert "20 sampled functions" in out

    @pytest.mark.parametrize("n", ["0", "9", "100"])
    def test_rejects_input_count_out_of_range(self, n, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["census", "--n-input", n])
        assert exc.value.code == 2
        assert "input" in capsys.readouterr().err

    def test_list(self, capsys):
        main(["census", "--n-input", "1", "--list"])
        assert len(capsys.readouterr().out.splitlines()) == 2 + 4


class TestPlot:

    def test_writes_png(self, tmp_path):
        out = tmp_path / "and.png"
        assert main(["plot", "--gate", "AND", "--out", str(out)]) == 0
        assert out.read_bytes()[:4] == b"\x89PNG"


def test_parser_defaults():
    args = build_parser().parse_args(["table", "--gate", "OR"])
    assert args.sep == ","
    assert args.label_prefix == "x"
