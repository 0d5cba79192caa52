"""hufftree CLI.

This is the stable CLI entrypoint (console-script: ``hufftree``).

Output policy:
  - stats blocks go to stdout (``--quiet`` silences them)
  - errors go to stderr as ``[hufftree] ...`` with the exit code from errors.py
  - ``--debug`` re-raises to show the stack trace
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from hufftree.errors import EXIT_GENERIC, HuffTreeError, UsageError


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")
    p.add_argument("--quiet", action="store_true", help="Do not print stats")


def _require_input(path: Path) -> None:
    if not path.is_file():
        raise UsageError(f"input file not found: {path}")


def _cmd_compress(input_path: Path, output_path: Path, *, quiet: bool) -> int:
    from hufftree.processor import compress_file

    _require_input(input_path)
    stats = compress_file(input_path, output_path)
    if not quiet:
        ratio = (stats.bytes_out / stats.bytes_in) if stats.bytes_in else 0.0
        print("=== hufftree compress ===")
        print(f"Input          : {input_path} ({stats.bytes_in} byte)")
        print(f"Output         : {output_path} ({stats.bytes_out} byte)")
        print(f"Leaves         : {stats.distinct_symbols} (PSEUDO_EOF included)")
        print(f"Header/body    : {stats.header_bits} / {stats.body_bits} bit")
        print(f"Ratio          : {ratio:.3f} (1.0 = no compression)")
        print("=========================")
    return 0


def _cmd_decompress(input_path: Path, output_path: Path, *, quiet: bool) -> int:
    from hufftree.processor import decompress_file

    _require_input(input_path)
    stats = decompress_file(input_path, output_path)
    if not quiet:
        print(f"Decompressed {input_path} -> {output_path} ({stats.bytes_out} byte)")
    return 0


def _cmd_verify(input_path: Path) -> int:
    from hufftree.verify import verify_compressed_file

    _require_input(input_path)
    verify_compressed_file(input_path)
    print("OK")
    return 0


def _cmd_show(input_path: Path, *, as_json: bool) -> int:
    from hufftree.verify import describe_compressed_file

    _require_input(input_path)
    info = describe_compressed_file(input_path)
    if as_json:
        print(json.dumps(info, indent=2))
        return 0

    print("=== hufftree show ===")
    print(f"Magic          : {info['magic']}")
    print(f"Header         : {info['header_bits']} bit")
    print(f"Leaves / depth : {info['leaves']} / {info['depth']}")
    for sym, code in info["codes"].items():
        print(f"  {sym:>3} : {code or '(empty)'}")
    print("=====================")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hufftree", description="Huffman compressor with a self-describing tree header"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", help="Lossless compress")
    p_c.add_argument("input", type=Path)
    p_c.add_argument("output", type=Path)
    _add_common_args(p_c)

    p_d = sub.add_parser("decompress", help="Lossless decompress")
    p_d.add_argument("input", type=Path)
    p_d.add_argument("output", type=Path)
    _add_common_args(p_d)

    p_v = sub.add_parser("verify", help="Decode a compressed file without writing output")
    p_v.add_argument("input", type=Path)
    _add_common_args(p_v)

    p_s = sub.add_parser("show", help="Show magic, tree shape and code table")
    p_s.add_argument("input", type=Path)
    p_s.add_argument("--json", action="store_true", help="Print a JSON object")
    _add_common_args(p_s)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "compress":
            return _cmd_compress(ns.input, ns.output, quiet=bool(ns.quiet))
        if ns.cmd == "decompress":
            return _cmd_decompress(ns.input, ns.output, quiet=bool(ns.quiet))
        if ns.cmd == "verify":
            return _cmd_verify(ns.input)
        if ns.cmd == "show":
            return _cmd_show(ns.input, as_json=bool(ns.json))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HuffTreeError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[hufftree] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[hufftree] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
