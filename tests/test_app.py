from __future__ import annotations

import pytest

from cyclebasis.app import AppConfig, CycleBasisApp, build_parser, main

NOT_BICONNECTED = """
0 2
0 3
3,1
1 4

4 5
5 3
"""


def test_run_from_text():
    app = CycleBasisApp(AppConfig())
    assert app.run_from_text(NOT_BICONNECTED) == "1\n4 1 4 5 3"


def test_run_from_file_writes_output_and_reports(tmp_path):
    src = tmp_path / "graph.txt"
    dst = tmp_path / "basis.txt"
    log = tmp_path / "debug.log"
    src.write_text("a b\nb c\nc a\nc c\nz\n", encoding="utf-8")

    stages = []
    stats = {}
    cfg = AppConfig(
        debug_log_file=str(log),
        on_progress=lambda stage, p: stages.append(stage),
        on_complete=stats.update,
    )
    CycleBasisApp(cfg).run_from_file(str(src), str(dst))

    lines = dst.read_text(encoding="utf-8").splitlines()
    assert lines == ["2", "3 b c a", "1 c"]
    assert stages[0] == "start" and stages[-1] == "write_output"
    assert "validate" in stages
    assert stats["cycles"] == 2
    assert "Validated 2 cycles" in log.read_text(encoding="utf-8")


def test_verbose_prints(capsys):
    CycleBasisApp(AppConfig(verbose=True)).run_from_text("1 2\n2 3\n3 1")
    assert "Found 1 cycles" in capsys.readouterr().out


def test_max_edges(tmp_path):
    src = tmp_path / "graph.txt"
    src.write_text("1 2\n2 3\n3 1\n", encoding="utf-8")
    stats = {}
    app = CycleBasisApp(AppConfig(max_edges=2, on_complete=stats.update))
    with pytest.raises(MemoryError):
        app.run_from_file(str(src), str(tmp_path / "out.txt"))
    assert stats["cycles"] == -1
    assert any("Process failed" in line for line in app.debug_output)


def test_parser_flags():
    args = build_parser().parse_args(["in.txt", "out.txt", "--no-validate", "--verbose", "--max-edges", "10"])
    assert args.input_pos == "in.txt"
    assert args.validate is False
    assert args.verbose is True
    assert args.max_edges == 10


def test_main(tmp_path):
    src = tmp_path / "graph.txt"
    dst = tmp_path / "basis.txt"
    src.write_text("0 1\n1 2\n2 3\n3 0\n0 2\n", encoding="utf-8")
    assert main(["--input", str(src), "--output", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8").splitlines()[0] == "2"


def test_main_requires_files():
    with pytest.raises(SystemExit):
        main([])


def test_parser_defaults_and_string_flag():
    args = build_parser().parse_args(["--debug-log-file", "run.log"])
    assert args.debug_log_file == "run.log"
    assert args.validate is True
    assert args.verbose is False
    assert args.max_edges == 800000
    assert not hasattr(args, "on_progress")
