import argparse, os
import matplotlib.pyplot as plt
import numpy as np

from codec import compress
from units import group_text

DEFAULT_UNITS = ("byte", "char", "char2")
TEXT_UNITS = ("byte", "char", "char2", "char3", "char4")


def units_for(text: str, unit: str):
    if unit == "byte":
        return text.encode("utf-8")
    if unit == "char":
        return text
    if unit not in TEXT_UNITS:
        raise ValueError(f"Unit {unit!r} cannot be measured on text (choose from {', '.join(TEXT_UNITS)})")
    return group_text(text, int(unit[len("char"):]))


def measure_rates(text: str, units=DEFAULT_UNITS):
    """
    Returns one row per unit granularity:
      {unit, original, compressed, ratio}
    """
    original = len(text.encode("utf-8"))
    rows = []
    for unit in units:
        size = len(compress(units_for(text, unit), unit))
        rows.append(dict(unit=unit, original=original, compressed=size,
                         ratio=original / size if size else float("inf")))
    return rows


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("inputs", nargs="+", help="UTF-8 text files")
    ap.add_argument("--units", default=",".join(DEFAULT_UNITS), help="comma separated")
    ap.add_argument("--output", default="results/fig_rates.png")
    args = ap.parse_args(argv)
    units = [u.strip() for u in args.units.split(",") if u.strip()]
    bad = [u for u in units if u not in TEXT_UNITS]
    if bad:
        ap.error(f"unsupported --units {','.join(bad)} (choose from {','.join(TEXT_UNITS)})")

    table = []
    for path in args.inputs:
        with open(path, "r", encoding="utf-8") as f:
            rows = measure_rates(f.read(), units)
        for r in rows:
            print(f"[rates] {os.path.basename(path)} {r['unit']:>6}: "
                  f"{r['original'] / 1024:.1f} KiB -> {r['compressed'] / 1024:.1f} KiB, ratio={r['ratio']:.2f}")
        table.append([r["ratio"] for r in rows])

    ratios = np.array(table)  # (files, units)
    x = np.arange(len(args.inputs))
    w = 0.8 / max(1, len(units))

    plt.figure(figsize=(max(4, 2 * len(args.inputs)), 3))
    for i, unit in enumerate(units):
        plt.bar(x + i * w, ratios[:, i], width=w, label=unit)
    plt.xticks(x + w * (len(units) - 1) / 2, [os.path.basename(p) for p in args.inputs], fontsize=8)
    plt.ylabel("compression ratio")
    plt.legend(fontsize=8)
    plt.tight_layout()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    plt.savefig(args.output, dpi=300)
    print(f"[rates] wrote {args.output}")


if __name__ == "__main__":
    main()
