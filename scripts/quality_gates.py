#!/usr/bin/env python3
"""
Quality gates runner for glowkit.

Runs each gate as a subprocess and writes evidence to artifacts/:
- quality_gates_run.json: machine-readable results
- quality_gates_summary.md: human-readable table

Gates:
1. rules: kit rules loading and validation tests
2. lint: ruff check
3. format: ruff format --check (warning only)
4. types: mypy on the glowkit package
5. tests: the full pytest suite
6. a11y: accessibility attribute and developer warning tests
"""

from __future__ import annotations

import argparse
import datetime
import json
import subprocess
import sys
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).parent.parent
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"


@dataclass
class GateConfig:
    name: str
    description: str
    command: list[str]
    required: bool = True
    timeout_seconds: int = 300


GATES: list[GateConfig] = [
    GateConfig(
        name="rules",
        description="Kit rules validation",
        command=["python", "-m", "pytest", "tests/unit/test_kit_rules.py", "-q"],
    ),
    GateConfig(
        name="lint",
        description="Code linting (ruff)",
        command=["python", "-m", "ruff", "check", "."],
    ),
    GateConfig(
        name="format",
        description="Code formatting check (ruff)",
        command=["python", "-m", "ruff", "format", "--check", "."],
        required=False,
    ),
    GateConfig(
        name="types",
        description="Type checking (mypy)",
        command=["python", "-m", "mypy", "glowkit"],
    ),
    GateConfig(
        name="tests",
        description="All tests (pytest)",
        command=["python", "-m", "pytest", "-q"],
        timeout_seconds=600,
    ),
    GateConfig(
        name="a11y",
        description="Accessibility attributes and warnings",
        command=["python", "-m", "pytest", "tests/unit", "-k", "aria or label or role", "-q"],
    ),
]


@dataclass
class GateResult:
    name: str
    status: str  # "pass" | "fail" | "warn" | "skip"
    exit_code: int
    duration_seconds: float
    output: str
    command: list[str]
    required: bool


def _status(config: GateConfig, exit_code: int) -> str:
    if exit_code == 0:
        return "pass"
    return "fail" if config.required else "warn"


def run_gate(config: GateConfig) -> GateResult:
    """Run one gate; timeouts and launch errors count as failures."""
    print(f"[{config.name}] {config.description}...", end="", flush=True)
    start = time.monotonic()

    try:
        completed = subprocess.run(
            config.command,
            capture_output=True,
            text=True,
            timeout=config.timeout_seconds,
            cwd=PROJECT_ROOT,
        )
        exit_code = completed.returncode
        status = _status(config, exit_code)
        output = completed.stdout + completed.stderr
    except subprocess.TimeoutExpired:
        exit_code, status = -1, "fail"
        output = f"Timeout after {config.timeout_seconds}s"
    except OSError as e:
        exit_code, status = -1, "fail"
        output = str(e)

    duration = time.monotonic() - start
    print(f" {status.upper()} ({duration:.1f}s)")
    return GateResult(
        name=config.name,
        status=status,
        exit_code=exit_code,
        duration_seconds=duration,
        output=output,
        command=config.command,
        required=config.required,
    )


def run_all_gates(
    gates: list[GateConfig] | None = None,
    skip_gates: list[str] | None = None,
) -> list[GateResult]:
    skip = set(skip_gates or [])
    results: list[GateResult] = []
    for config in gates or GATES:
        if config.name in skip:
            print(f"[{config.name}] SKIPPED")
            results.append(
                GateResult(
                    name=config.name,
                    status="skip",
                    exit_code=0,
                    duration_seconds=0.0,
                    output="Skipped by user",
                    command=config.command,
                    required=config.required,
                )
            )
        else:
            results.append(run_gate(config))
    return results


def build_report(results: list[GateResult]) -> dict[str, Any]:
    """Summarise results; the run fails only when a required gate fails."""
    counts = {status: 0 for status in ("pass", "fail", "warn", "skip")}
    for r in results:
        counts[r.status] += 1
    failed_required = any(r.status == "fail" and r.required for r in results)

    return {
        "timestamp_utc": datetime.datetime.now(datetime.UTC).isoformat(),
        "overall_status": "fail" if failed_required else "pass",
        "counts": counts,
        "gates": [
            {k: v for k, v in asdict(r).items() if k != "output"} for r in results
        ],
    }


def render_summary(report: dict[str, Any], results: list[GateResult]) -> str:
    lines = [
        "# Quality Gates Summary",
        "",
        f"**Status**: {report['overall_status'].upper()}",
        f"**Timestamp**: {report['timestamp_utc']}",
        "",
        "| Gate | Status | Duration | Required |",
        "|------|--------|----------|----------|",
    ]
    for r in results:
        lines.append(
            f"| {r.name} | {r.status.upper()} | {r.duration_seconds:.1f}s "
            f"| {'Yes' if r.required else 'No'} |"
        )

    failures = [r for r in results if r.status == "fail" and r.required]
    for r in failures:
        lines.extend(
            ["", f"## {r.name}", "", f"Command: `{' '.join(r.command)}`", "", "```"]
        )
        lines.append(r.output or "No output")
        lines.append("```")
    return "\n".join(lines) + "\n"


def write_artifacts(
    report: dict[str, Any],
    results: list[GateResult],
    out_dir: Path = ARTIFACTS_DIR,
) -> tuple[Path, Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    json_path = out_dir / "quality_gates_run.json"
    md_path = out_dir / "quality_gates_summary.md"
    json_path.write_text(json.dumps(report, indent=2))
    md_path.write_text(render_summary(report, results))
    return json_path, md_path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run glowkit quality gates.")
    parser.add_argument("--skip", nargs="*", default=[], help="Gates to skip")
    parser.add_argument("--only", nargs="*", help="Only run these gates")
    parser.add_argument("--list", action="store_true", help="List gates and exit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.list:
        for gate in GATES:
            req = "required" if gate.required else "optional"
            print(f"  - {gate.name}: {gate.description} ({req})")
        return 0

    gates = GATES
    if args.only:
        gates = [g for g in GATES if g.name in args.only]
        if not gates:
            print(f"Error: No gates found matching: {args.only}")
            return 1

    results = run_all_gates(gates, skip_gates=args.skip)
    report = build_report(results)
    json_path, md_path = write_artifacts(report, results)
    print(f"\nJSON report: {json_path}\nMarkdown summary: {md_path}")

    if report["overall_status"] == "pass":
        print("SUCCESS: All required quality gates passed.")
        return 0
    print("FAILURE: One or more required quality gates failed.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
