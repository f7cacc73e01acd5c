import argparse, os
from codec import compress
from errors import UnsupportedUnit
from freqtree import build_tree_from_units
from metrics import compression_ratio, tree_report
from multipass import multipass_compress
from units import get_codec


def read_units(path: str, unit: str):
    with open(path, "rb") as f:
        raw = f.read()
    if unit == "byte":
        return raw, raw
    return raw.decode("utf-8"), raw


def main(argv=None):
    ap = argparse.ArgumentParser(description="frequency-tree compressor")
    ap.add_argument("--input", required=True, help="file to compress")
    ap.add_argument("--output", required=True, help="path to compressed output")
    ap.add_argument("--unit", choices=["byte", "char"], default="char",
                    help="symbol granularity (default char, input read as UTF-8)")
    ap.add_argument("--passes", type=int, default=1,
                    help="max byte-wise passes; >1 writes a multi-pass stream (default 1)")
    args = ap.parse_args(argv)

    try:
        units, raw = read_units(args.input, args.unit)
    except UnicodeDecodeError as e:
        raise SystemExit(f"[encode] input is not UTF-8 text, use --unit byte: {e}")

    try:
        if args.passes > 1:
            out, level = multipass_compress(raw, cap=args.passes)
        else:
            out = compress(units, args.unit)
            level = None
    except UnsupportedUnit as e:
        raise SystemExit(f"[encode] {e}")

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(out)

    print(f"[encode] wrote {args.output}")
    if level is not None:
        print(f"[encode] multipass level={level}/{args.passes}")
    else:
        rep = tree_report(build_tree_from_units(units), units, get_codec(args.unit))
        print(f"[encode] units={rep['units']}, distinct={rep['leaves']}, depth={rep['depth']}, "
              f"tree={rep['tree_bytes']}B, payload={rep['payload_bytes']}B")
        print(f"[encode] entropy={rep['entropy']:.3f} bits/unit, code={rep['mean_length']:.3f} bits/unit")
    print(f"[encode] {len(raw)}B -> {len(out)}B, ratio={compression_ratio(len(raw), len(out)):.2f}")


if __name__ == "__main__":
    main()
