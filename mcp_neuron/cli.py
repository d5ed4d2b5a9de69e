# ─────────────────────────────────────────────────────────────────────────────
#  Imports
# ─────────────────────────────────────────────────────────────────────────────
import argparse
import random
import sys
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from .errors import MCPError
from .gate import Gate
from .gates import GATE_PARAMETERS, named_gate
from .separability import (
    MAX_EXACT_N,
    SAMPLE_SIZE,
    is_separable,
    proportion_separable,
    realizable_functions,
    realizations,
    separable_functions,
)
from .truth_table import TruthTable, default_labels, int_to_outputs, truth_table

# ─────────────────────────────────────────────────────────────────────────────
#  Defaults
# ─────────────────────────────────────────────────────────────────────────────
@dataclass
class CLIDefaults:
    """Defaults shared by the sub-commands."""
    label_prefix: str   = "x"      # input columns become x1, x2, …
    output_label: str   = "y"
    sep:          str   = ","      # delimiter for --csv
    fig_width:    float = 5.0
    fig_height:   float = 4.0
    sample_size:  int   = SAMPLE_SIZE  # census --separable above MAX_EXACT_N inputs
    seed:         int   = 42


# ─────────────────────────────────────────────────────────────────────────────
#  Helpers
# ─────────────────────────────────────────────────────────────────────────────
def _gate_from_args(args) -> Gate:
    if args.gate:
        return named_gate(args.gate)
    if args.weights is None or args.threshold is None:
        raise MCPError("give either --gate or both --weights and --threshold")
    return Gate(args.weights, args.threshold)


def _parse_bits(text: List[str]) -> Tuple[int, ...]:
    """Accept '0 1 1 0', '0110' or '0,1,1,0', as one argument or several."""
    joined = "".join("".join(text).split()).replace(",", "")
    bits = []
    for ch in joined:
        if ch not in "01":
            raise MCPError(f"outputs must be 0/1 digits, got {ch!r}")
        bits.append(int(ch))
    return tuple(bits)


# ─────────────────────────────────────────────────────────────────────────────
#  Sub-commands
# ─────────────────────────────────────────────────────────────────────────────
def cmd_table(args) -> int:
    gate = _gate_from_args(args)
    labels = args.labels or default_labels(gate.m, args.label_prefix)
    output_label = args.output_label or gate.name or CLIDefaults.output_label
    table = truth_table(gate, input_labels=labels, output_label=output_label)

    print(gate)
    print(table)
    if args.csv:
        table.to_csv(args.csv, sep=args.sep)
        print(f"✓ saved {args.csv}")
    if args.pla:
        with open(args.pla, "w", encoding="utf-8") as f:
            f.write(table.to_pla())
        print(f"✓ saved {args.pla}")
    return 0


def cmd_realize(args) -> int:
    if args.csv:
        outputs = tuple(TruthTable.from_csv(args.csv, sep=args.sep).outputs())
    else:
        outputs = _parse_bits(args.outputs)

    gates = realizations(outputs)
    if not gates:
        print(f"✗ no single MCP gate realizes {list(outputs)}"
              f" (linearly separable: {is_separable(outputs)})")
        return 1

    print(f"✓ {len(gates)} gate(s) realize {list(outputs)}:")
    for g in gates:
        print(f"  {g}")
    return 0


def cmd_census(args) -> int:
    m = args.n_input
    realizable = realizable_functions(m)
    total = 1 << (1 << m)
    print(f"=== n={m}: {total} Boolean functions ===")
    print(f"  → {len(realizable)} realizable with weights in {{-1,0,1}}")
    if args.separable:
        if m <= MAX_EXACT_N:
            separable = separable_functions(m)
            print(f"  → {len(separable)} linearly separable")
            missing = sorted(set(separable) - set(realizable))
            if missing:
                print(f"  → separable but needing larger weights: {missing}")
        else:
            rng = random.Random(args.seed)
            p = proportion_separable(m, args.sample, rng)
            print(f"  → proportion linearly separable ≈ {p:.6f}"
                  f"   ({args.sample} sampled functions, seed {args.seed})")
    if args.list:
        for code in realizable:
            print(f"  {code:>{len(str(total))}}  {int_to_outputs(code, m)}")
    return 0


def cmd_plot(args) -> int:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .plot import plot_decision_regions

    gate = _gate_from_args(args)
    fig, ax = plt.subplots(figsize=(args.fig_width, args.fig_height))
    plot_decision_regions(gate, ax=ax)
    fig.tight_layout()
    fig.savefig(args.out)
    plt.close(fig)
    print(f"✓ saved {args.out}")
    return 0


# ─────────────────────────────────────────────────────────────────────────────
#  Command-line interface
# ─────────────────────────────────────────────────────────────────────────────
def _add_gate_args(p):
    p.add_argument("--gate", type=str.upper, choices=list(GATE_PARAMETERS))
    p.add_argument("--weights", type=int, nargs="+")
    p.add_argument("--threshold", type=int)


def build_parser() -> argparse.ArgumentParser:
    base = asdict(CLIDefaults())
    p = argparse.ArgumentParser(
        prog="mcp-neuron",
        description="McCulloch-Pitts neuron logic gates and truth tables.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    t = sub.add_parser("table", help="print a gate's truth table")
    _add_gate_args(t)
    t.add_argument("--labels", nargs="+")
    t.add_argument("--label-prefix", default=base["label_prefix"])
    t.add_argument("--output-label", default=None)
    t.add_argument("--csv")
    t.add_argument("--pla")
    t.add_argument("--sep", default=base["sep"])
    t.set_defaults(func=cmd_table)

    r = sub.add_parser("realize", help="find gates computing a truth table")
    r.add_argument("outputs", nargs="*", help="2**m output bits in product order")
    r.add_argument("--csv", help="read the outputs from a table written by 'table --csv'")
    r.add_argument("--sep", default=base["sep"])
    r.set_defaults(func=cmd_realize)

    c = sub.add_parser("census", help="count the functions a single gate computes")
    c.add_argument("--n-input", type=int, required=True)
    c.add_argument("--separable", action="store_true",
                   help="also count linearly separable functions (LP)")
    c.add_argument("--sample", type=int, default=base["sample_size"],
                   help=f"random functions to test when n > {MAX_EXACT_N}")
    c.add_argument("--seed", type=int, default=base["seed"])
    c.add_argument("--list", action="store_true")
    c.set_defaults(func=cmd_census)

    g = sub.add_parser("plot", help="plot a two-input gate's decision regions")
    _add_gate_args(g)
    g.add_argument("--out", required=True)
    g.add_argument("--fig-width", type=float, default=base["fig_width"])
    g.add_argument("--fig-height", type=float, default=base["fig_height"])
    g.set_defaults(func=cmd_plot)
    return p


# ─────────────────────────────────────────────────────────────────────────────
#  Main
# ─────────────────────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (MCPError, OSError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
