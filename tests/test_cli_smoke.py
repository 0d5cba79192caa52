from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path


def _run_cli(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run hufftree CLI through a python -c wrapper.

    This avoids assuming the console-script entrypoint is installed.
    """
    cmd = [
        sys.executable,
        "-c",
        "from hufftree.cli import main; raise SystemExit(main())",
        *args,
    ]
    src = str(Path(__file__).resolve().parents[1] / "src")
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (src, env.get("PYTHONPATH")) if p)
    return subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        env=env,
        text=True,
        capture_output=True,
    )


def test_cli_roundtrip(tmp_path: Path) -> None:
    inp = tmp_path / "in.txt"
    out = tmp_path / "out.huff"
    back = tmp_path / "back.txt"

    data = "HELLO 123\nRIGA ARTICOLO: vite M3 qty=10 prezzo=1.20\n"
    inp.write_text(data, encoding="utf-8")

    r = _run_cli("compress", str(inp), str(out))
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert "=== hufftree compress ===" in r.stdout

    r = _run_cli("verify", str(out))
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert "OK" in r.stdout

    r = _run_cli("decompress", str(out), str(back), "--quiet")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert r.stdout == ""
    assert back.read_text(encoding="utf-8") == data


def test_cli_show_json_empty_input(tmp_path: Path) -> None:
    inp = tmp_path / "empty.bin"
    out = tmp_path / "empty.huff"
    inp.write_bytes(b"")

    r = _run_cli("compress", str(inp), str(out), "--quiet")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert out.read_bytes().hex() == "face8201c000"

    r = _run_cli("show", str(out), "--json")
    assert r.returncode == 0, (r.stdout, r.stderr)
    info = json.loads(r.stdout)
    assert info["magic"] == "0xface8201"
    assert info["leaves"] == 1
    assert info["header_bits"] == 10
    assert info["codes"] == {"256": ""}


def test_cli_bad_magic_exit_10(tmp_path: Path) -> None:
    bad = tmp_path / "bad.huff"
    bad.write_bytes(b"not a huffman file")

    r = _run_cli("decompress", str(bad), str(tmp_path / "x.bin"))
    assert r.returncode == 10
    assert "[hufftree]" in r.stderr


def test_cli_missing_terminator_exit_13(tmp_path: Path) -> None:
    trunc = tmp_path / "trunc.huff"
    trunc.write_bytes(bytes.fromhex("face8201242c0241"))

    r = _run_cli("verify", str(trunc))
    assert r.returncode == 13
    assert "PSEUDO_EOF" in r.stderr


def test_cli_missing_input_exit_2(tmp_path: Path) -> None:
    r = _run_cli("compress", str(tmp_path / "nope.txt"), str(tmp_path / "out.huff"))
    assert r.returncode == 2
    assert "[hufftree]" in r.stderr


def test_cli_main_in_process(tmp_path: Path, capsys) -> None:
    from hufftree.cli import main

    inp = tmp_path / "aaab.txt"
    inp.write_bytes(b"AAAB")
    out = tmp_path / "aaab.huff"

    assert main(["compress", str(inp), str(out), "--quiet"]) == 0
    assert main(["show", str(out)]) == 0
    text = capsys.readouterr().out
    assert " 65 : 1" in text
    assert "256 : 01" in text


def test_cli_compress_onto_itself_exit_2(tmp_path: Path) -> None:
    p = tmp_path / "f.bin"
    p.write_bytes(b"important data")

    r = _run_cli("compress", str(p), str(p))
    assert r.returncode == 2
    assert "[hufftree]" in r.stderr
    assert p.read_bytes() == b"important data"


def test_cli_unsupported_version_exit_11(tmp_path: Path) -> None:
    old = tmp_path / "old.huff"
    old.write_bytes(bytes.fromhex("face8200242c0241e2"))

    r = _run_cli("decompress", str(old), str(tmp_path / "x.bin"))
    assert r.returncode == 11
    assert "[hufftree]" in r.stderr
    assert not (tmp_path / "x.bin").exists()


def test_cli_malformed_header_exit_12(tmp_path: Path) -> None:
    trunc = tmp_path / "trunc.huff"
    trunc.write_bytes(bytes.fromhex("face820124"))

    r = _run_cli("verify", str(trunc))
    assert r.returncode == 12
    assert "[hufftree]" in r.stderr


def test_cli_debug_reraises(tmp_path: Path) -> None:
    bad = tmp_path / "bad.huff"
    bad.write_bytes(b"not a huffman file")

    r = _run_cli("verify", str(bad), "--debug")
    assert r.returncode != 0
    assert "Traceback" in r.stderr
    assert "BadMagic" in r.stderr
