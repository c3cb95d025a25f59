"""
Experiment runner: times a set of sequence operations from a YAML config.

Usage (from repo root):
    python -m seqalgo.bench.runner experiments/configs/01_ops_scaling.yaml
    seqalgo-bench experiments/configs/01_ops_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample, plus status lines
    - summary.csv             # median + IQR per (op, n)
    - (console) rich table and tqdm progress

Design notes:
- For each size n we generate ONE base dataset (plus one partner dataset for
  two-sequence operations) and hand the same input to every operation.
- Datasets and randomised operations (sample) draw from separate streams
  spawned from `seed`, so the operation list never changes the datasets.
- Every call gets fresh copies of the inputs, so in-place operations are
  timed on the same data as everything else.
- On timeout/error for an operation at size n, larger sizes are skipped.
- With `validate: true` the last output per (op, n) is checked against the
  oracles in `seqalgo.validate`.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from seqalgo.bench.measure import time_op_call
from seqalgo.datasets import make_dataset
from seqalgo.diagnostics import CollectingObserver
from seqalgo.registry import OperationSpec, get_operation
from seqalgo.validate import check_result

_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "operations",
)
PARTNER_MODES = ("dataset", "same", "reversed")
SUMMARY_COLUMNS = ["op", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #


@dataclass(frozen=True)
class OpRun:
    name: str
    spec: OperationSpec
    args: Dict[str, Any] = field(default_factory=dict)
    partner: str = "dataset"


# ------------------------- helpers: IO & meta ------------------------- #


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False, default=str))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- config resolution ------------------------- #


def _resolve_operations(cfg_ops: List[Dict[str, Any]]) -> List[OpRun]:
    runs: List[OpRun] = []
    seen = set()
    for entry in cfg_ops:
        if not isinstance(entry, dict):
            raise ValueError(f"Each operation entry must be a mapping, got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each operation must have a string 'name' field")
        label = entry.get("label", name)
        if label in seen:
            raise ValueError(f"Duplicate operation label in config: {label} (set 'label' to disambiguate)")
        seen.add(label)

        spec = get_operation(name)
        args = entry.get("args") or {}
        if not isinstance(args, dict):
            raise ValueError(f"Operation '{label}': 'args' must be a dict if provided")
        for reserved in ("observer", "rng"):
            if reserved in args:
                raise ValueError(f"Operation '{label}': '{reserved}' is supplied by the runner")

        partner = entry.get("partner", "dataset")
        if partner not in PARTNER_MODES:
            raise ValueError(f"Operation '{label}': partner must be one of {PARTNER_MODES}, got {partner!r}")

        runs.append(OpRun(name=label, spec=spec, args=dict(args), partner=partner))
    return runs


def _inputs_for(run: OpRun, base: List[int], partner: List[int]) -> List[List[int]]:
    if run.spec.arity == 1:
        return [base]
    if run.partner == "same":
        return [base, list(base)]
    if run.partner == "reversed":
        return [base, base[::-1]]
    return [base, partner]


# ------------------------- summary ------------------------- #


def _iqr_ns(group: pd.DataFrame) -> int:
    return int(group["time_ns"].quantile(0.75) - group["time_ns"].quantile(0.25))


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    agg = df.groupby(["op", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
    )
    iqr = df.groupby(["op", "n"])[["time_ns"]].apply(_iqr_ns).rename("iqr_ns").reset_index()
    out = agg.merge(iqr, on=["op", "n"], how="left")
    out[["median_ns", "min_ns", "max_ns", "iqr_ns"]] = out[["median_ns", "min_ns", "max_ns", "iqr_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["op", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Operation Benchmark Summary (median ± IQR in µs)")
    table.add_column("Operation", style="bold")
    picks: List[Tuple[str, int]] = []
    for n in dict.fromkeys((sizes[0], sizes[len(sizes) // 2], sizes[-1])):
        picks.append((f"n={n}", n))
        table.add_column(f"n={n}", justify="right")

    for op in summary["op"].unique():
        row = [str(op)]
        for _, n in picks:
            s = summary[(summary["op"] == op) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
                continue
            median_us = int(s["median_ns"].values[0]) / 1e3
            iqr_us = int(s["iqr_ns"].values[0]) / 1e3
            row.append(f"{median_us:.1f} ± {iqr_us:.1f}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #


def run_experiment(config_path: Path, *, quiet: bool = False) -> Path:
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec = dict(cfg["dataset"])
    validate = bool(cfg.get("validate", False))

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    runs = _resolve_operations(list(cfg["operations"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    # Separate streams: operations that draw randomness must not shift the datasets.
    data_ss, op_ss = np.random.SeedSequence(int(cfg["seed"])).spawn(2)
    data_rng = np.random.default_rng(data_ss)
    op_rng = np.random.default_rng(op_ss)
    skip = {r.name: False for r in runs}

    if not quiet:
        _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
        _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
        _console.print(f"[bold]Operations:[/bold] {', '.join(r.name for r in runs)}")

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=quiet):
        base = make_dataset(n, dataset_spec, data_rng)
        partner = make_dataset(n, dataset_spec, data_rng)

        for run in runs:
            if skip[run.name]:
                continue

            observer = CollectingObserver()
            kwargs = dict(run.args)
            if run.spec.takes_observer:
                kwargs["observer"] = observer
            if run.spec.takes_rng:
                kwargs["rng"] = op_rng
            seqs = _inputs_for(run, base, partner)

            res = time_op_call(
                op_name=run.name,
                op_fn=run.spec.fn,
                seqs=seqs,
                kwargs=kwargs,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                defensive_copy=True,
            )

            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {"op": run.name, "n": n, "dataset": dataset_spec, "trial": trial, "time_ns": int(t_ns), "args": run.args},
                    results_path,
                )

            status = res["status"]
            record: Dict[str, Any] = {
                "op": run.name,
                "n": n,
                "status": status,
                "diagnostics": len(observer),
                "args": run.args,
            }
            if status == "timeout":
                skip[run.name] = True
                record["timed_out_on_repeat"] = res["timed_out_on_repeat"]
            elif status == "error":
                skip[run.name] = True
                record["error"] = res["error"]
            elif validate and res["samples_ns"] and not run.spec.mutating:
                record["valid"] = check_result(run.spec.name, seqs, res["last_output"], **run.args)
                if record["valid"] is False and not quiet:
                    _console.print(f"[bold red]Validation failed:[/bold red] {run.name} at n={n}")
            _append_jsonl(record, results_path)

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    if not quiet:
        _print_summary(summary_df, sizes)
        _console.print("[bold green]Done.[/bold green] Wrote:")
        for p in (results_path, summary_path, meta_path, cfg_resolved_path):
            _console.print(f" - {p}")

    return run_dir


# ------------------------- CLI ------------------------- #


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Benchmark sequence operations from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--quiet", action="store_true", help="Suppress console output")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, quiet=args.quiet)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
