from __future__ import annotations

import argparse
import os
import re
import sys
import time
import traceback
from dataclasses import dataclass, fields
from typing import Callable, Dict, Hashable, List, Optional

from .errors import InvalidCycleError
from .graph import EdgeListGraph
from .paton import PatonCycleBase
from .utils import CycleUtils


# =====================================================
# App-level orchestration
# =====================================================
@dataclass(frozen=True)
class AppConfig:
    """Config container - all parameters can be set from the command line"""
    # Print detailed debug/progress info. Default: False.
    verbose: bool = False
    # Log filename for debug output.
    debug_log_file: Optional[str] = None
    # Check every cycle is simple and the count matches |E| - |V| + cc. Default: True.
    validate: bool = True
    # Max edge count for memory safety.
    max_edges: int = 800000

    # Callback interfaces
    on_progress: Optional[Callable[[str, float], None]] = None
    on_complete: Optional[Callable[[Dict], None]] = None


class CycleBasisApp:
    def __init__(self, config: Optional[AppConfig] = None):
        self.cfg = config or AppConfig()
        self.finder = PatonCycleBase()
        self.debug_output: List[str] = []
        self.progress_data: Dict[str, float] = {}

    def _progress(self, stage: str, progress: float = 0.0) -> None:
        """Progress callback"""
        self.progress_data[stage] = progress
        if self.cfg.on_progress:
            self.cfg.on_progress(stage, progress)

    def _debug_print(self, *args, **kwargs) -> None:
        """Unified debug printer"""
        msg = " ".join(str(arg) for arg in args)
        self.debug_output.append(msg)

        if self.cfg.verbose:
            print(*args, **kwargs)

    def _save_debug_log(self, log_file: Optional[str] = None) -> None:
        """Save debug log to file"""
        if log_file is None:
            log_file = self.cfg.debug_log_file

        if log_file and self.debug_output:
            try:
                with open(log_file, "w", encoding="utf-8") as f:
                    f.write("\n".join(self.debug_output))
                if self.cfg.verbose:
                    print(f"[DEBUG] Log saved to: {log_file}")
            except OSError as e:
                print(f"Failed to save log: {e}", file=sys.stderr)

    def _complete(self, stats: Dict) -> None:
        """Completion callback"""
        if self.cfg.on_complete:
            self.cfg.on_complete(stats)

    # -------- I/O --------
    @staticmethod
    def _split_rows(raw_lines: List[str]) -> List[List[str]]:
        lines = [re.split(r"[,\s]+", line) for line in raw_lines]
        return [list(filter(None, row)) for row in lines]

    def _read_input(self, input_file: str) -> List[List[str]]:
        with open(input_file, "r", encoding="utf-8", errors="ignore") as f:
            raw_lines = [line.strip() for line in f if line.strip()]
        return self._split_rows(raw_lines)

    def _read_input_from_text(self, text: str) -> List[List[str]]:
        """Read input from text string"""
        raw_lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        return self._split_rows(raw_lines)

    def _format_result(self, result_cycles: List[List[Hashable]]) -> str:
        """Format result as string"""
        lines = [f"{len(result_cycles)}"]
        for cycle_nodes in result_cycles:
            nodes = [str(x) for x in cycle_nodes]
            lines.append(f"{len(nodes)} {' '.join(nodes)}")
        return "\n".join(lines)

    def _write_output(self, output_file: str, result_cycles: List[List[Hashable]]) -> None:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(self._format_result(result_cycles) + "\n")

    # -------- pipeline --------
    def _validate(self, graph: EdgeListGraph, cycles: List[List[Hashable]]) -> None:
        beta = CycleUtils.cyclomatic_number(graph)
        if len(cycles) != beta:
            raise InvalidCycleError(f"Cycle count {len(cycles)} does not match cyclomatic number {beta}")
        for idx, cycle in enumerate(cycles):
            CycleUtils.assert_simple_cycle(graph, cycle, idx)
        self._debug_print(f"Validated {len(cycles)} cycles (beta={beta})")

    def _execute_pipeline(self, lines: List[List[str]]) -> List[List[Hashable]]:
        """Execute core pipeline, returning the cycle basis"""
        graph = EdgeListGraph.from_lines(lines)
        self._progress("build_graph", 0.2)

        edge_cnt = graph.number_of_edges()
        if edge_cnt > self.cfg.max_edges:
            raise MemoryError(f"Edge count {edge_cnt} exceeds limit {self.cfg.max_edges}")

        self._debug_print(f"Graph: {graph.number_of_vertices()} vertices, {edge_cnt} edges")

        self.finder.set_graph(graph)
        cycles = self.finder.find_cycle_base()
        self._progress("find_cycle_base", 0.7)
        self._debug_print(f"Found {len(cycles)} cycles")

        if self.cfg.validate:
            self._validate(graph, cycles)
            self._progress("validate", 0.85)

        return cycles

    def run_from_text(self, text: str) -> str:
        """Run pipeline on edge list text, returning formatted output"""
        cycles = self._execute_pipeline(self._read_input_from_text(text))
        return self._format_result(cycles)

    def run_from_file(self, input_file: str, output_file: str) -> None:
        """Run full pipeline from file input"""
        self._progress("start", 0.0)
        self._debug_print(f"Processing: {input_file}")

        start_time = time.time()
        cycle_count = -1

        try:
            lines = self._read_input(input_file)
            self._progress("read_input", 0.1)

            result_cycles = self._execute_pipeline(lines)
            cycle_count = len(result_cycles)

            self._write_output(output_file, result_cycles)
            self._progress("write_output", 1.0)

        except Exception as e:
            self._debug_print(f"Process failed: {input_file}, Error: {e}")
            self._debug_print(traceback.format_exc())
            raise
        finally:
            duration = time.time() - start_time
            self._debug_print(f"Completed: {input_file}, Duration: {duration:.2f}s")

            final_stats = {
                "input_file": input_file,
                "output_file": output_file,
                "duration": duration,
                "cycles": cycle_count,
                "progress": self.progress_data,
            }

            self._save_debug_log()
            self._complete(final_stats)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find a fundamental cycle basis (Paton) of an undirected graph.")

    parser.add_argument("--input", "-i", type=str, help="Input edge list file.")
    parser.add_argument("--output", "-o", type=str, help="Output file.")

    # Positional args compatibility: cyclebasis input_file output_file
    parser.add_argument("input_pos", nargs="?", help="Input file path (positional)")
    parser.add_argument("output_pos", nargs="?", help="Output file path (positional)")

    # AppConfig dynamic arguments
    # annotations are strings under `from __future__ import annotations`; callbacks are skipped
    for field in fields(AppConfig):
        if field.type not in ("bool", "int", "Optional[str]"):
            continue

        flag = field.name.replace("_", "-")
        if field.type == "bool":
            if field.default:
                parser.add_argument(f"--no-{flag}", dest=field.name, action="store_false", help=f"Disable {field.name}")
            else:
                parser.add_argument(f"--{flag}", dest=field.name, action="store_true", help=f"Enable {field.name}")
            parser.set_defaults(**{field.name: field.default})
        else:
            arg_type = int if field.type == "int" else str
            parser.add_argument(f"--{flag}", dest=field.name, type=arg_type, default=field.default, help=f"Set {field.name} (default: {field.default})")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    config_dict = {f.name: getattr(args, f.name) for f in fields(AppConfig) if f.name in args}
    config = AppConfig(**config_dict)

    input_file = args.input or args.input_pos
    output_file = args.output or args.output_pos
    if not input_file or not output_file:
        parser.error("Must specify input and output files (via positional args or --input/--output).")
    if not os.path.exists(input_file):
        parser.error(f"Input file not found: {input_file}")

    app = CycleBasisApp(config)
    app.run_from_file(input_file, output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
