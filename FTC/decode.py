import argparse, os
from codec import decompress
from errors import CompressionError
from multipass import multipass_decompress


def main(argv=None):
    ap = argparse.ArgumentParser(description="frequency-tree decompressor")
    ap.add_argument("--input", required=True, help="compressed file")
    ap.add_argument("--output", required=True, help="path to restored output")
    ap.add_argument("--unit", choices=["byte", "char"], default="char",
                    help="symbol granularity used at compression (default char)")
    ap.add_argument("--multipass", action="store_true",
                    help="input was written with --passes > 1")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    try:
        if args.multipass:
            raw = multipass_decompress(data)
        elif args.unit == "byte":
            raw = bytes(decompress(data, "byte"))
        else:
            raw = "".join(decompress(data, "char")).encode("utf-8")
    except CompressionError as e:
        raise SystemExit(f"[decode] {type(e).__name__}: {e}")

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(raw)
    print(f"[decode] wrote {args.output} ({len(data)}B -> {len(raw)}B)")


if __name__ == "__main__":
    main()
