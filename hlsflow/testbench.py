"""Testbench for the point-to-point design: stimulus, responses and statistics."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from hlsflow.dut import INPUT_WIDTH, run_dut, to_uint

RESET_CYCLES = 3


def read_stimulus(path: str | os.PathLike) -> list[int]:
    """Read whitespace-separated input samples, truncated to the input width."""
    text = Path(path).read_text()
    try:
        return [to_uint(int(token), INPUT_WIDTH) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"bad stimulus value in {path}: {exc}") from exc


def count_golden(path: str | os.PathLike) -> int:
    """Count the expected values held in a golden file."""
    return len(Path(path).read_text().split())


def write_responses(path: str | os.PathLike, values: Iterable[int]) -> None:
    """Write one response value per line."""
    with open(path, "w") as out:
        for value in values:
            out.write(f"{value}\n")


@dataclass
class LatencyStats:
    """Latency and throughput figures gathered as samples arrive."""

    num_samples: int = 0
    min_latency: int = 0
    max_latency: int = 0
    total_latency: int = 0
    start_cycle: int = 0
    first_cycle: int = 0

    def record(self, sent_cycle: int, received_cycle: int) -> None:
        """Record one sample sent and received at the given cycles."""
        latency = received_cycle - sent_cycle
        if self.num_samples == 0:
            self.total_latency = 0
            self.start_cycle = sent_cycle
            self.first_cycle = received_cycle
            self.min_latency = latency
            self.max_latency = latency
        self.min_latency = min(self.min_latency, latency)
        self.max_latency = max(self.max_latency, latency)
        self.total_latency += latency
        self.num_samples += 1

    def average_latency(self) -> int:
        """Whole-cycle average latency."""
        if self.num_samples == 0:
            raise ValueError("no samples recorded")
        return self.total_latency // self.num_samples

    def throughput(self, last_cycle: int) -> float:
        """Average number of cycles between received values."""
        if self.num_samples < 2:
            raise ValueError("throughput needs at least two samples")
        return (last_cycle - self.first_cycle) / (self.num_samples - 1)

    def report(self, last_cycle: int) -> str:
        """Human-readable performance summary."""
        throughput = self.throughput(last_cycle)
        return "\n".join(
            [
                f"Number of values received     {self.num_samples}",
                f"First value sent at cycle     {self.start_cycle}",
                f"First value received at cycle {self.first_cycle}",
                f"Last value received at cycle  {last_cycle}",
                f"Min latency: {self.min_latency} Max latency: {self.max_latency}",
                f"Average throughput {throughput:g} cycles per value.",
            ]
        )


@dataclass
class SimulationResult:
    """Responses of a run and the statistics gathered over it."""

    responses: list[int] = field(default_factory=list)
    stats: LatencyStats = field(default_factory=LatencyStats)
    last_cycle: int = 0


def simulate(values: Iterable[int], latency: int = 1, interval: int = 1) -> SimulationResult:
    """Run the design over ``values`` with a fixed pipeline latency and issue interval."""
    if latency < 0:
        raise ValueError(f"latency must not be negative, got {latency}")
    if interval < 1:
        raise ValueError(f"interval must be at least 1, got {interval}")
    result = SimulationResult()
    cycle = RESET_CYCLES
    for response in run_dut(values):
        received = cycle + latency
        result.stats.record(cycle, received)
        result.responses.append(response)
        result.last_cycle = received
        cycle += interval
    return result


def compare_results(response_path: str | os.PathLike, golden_path: str | os.PathLike) -> bool:
    """Whether the response file matches the golden file exactly."""
    golden = Path(golden_path).read_text()
    response = Path(response_path)
    if not response.is_file():
        return False
    return response.read_text() == golden


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the point-to-point design testbench.")
    parser.add_argument("--stimulus", default="stimulus.dat")
    parser.add_argument("--golden", default="golden.dat")
    parser.add_argument("--response", default="response.dat")
    parser.add_argument(
        "--output-dir",
        default=os.environ.get("BDW_SIM_CONFIG_DIR", "."),
        help="directory that receives the response file",
    )
    parser.add_argument("--latency", type=int, default=1)
    parser.add_argument("--interval", type=int, default=1)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Drive the stimulus through the design, write responses and compare."""
    args = _parse_args(argv)
    try:
        stimulus = read_stimulus(args.stimulus)
    except OSError:
        print(f"Couldn't open {args.stimulus} for reading.", file=sys.stderr)
        return 1
    try:
        expected = count_golden(args.golden)
    except OSError:
        print(f"Couldn't open golden file {args.golden}.", file=sys.stderr)
        return 1

    result = simulate(stimulus[:expected], args.latency, args.interval)
    response_path = Path(args.output_dir) / args.response
    try:
        write_responses(response_path, result.responses)
    except OSError:
        print(f"Couldn't open {response_path} for writing.", file=sys.stderr)
        return 1

    if len(result.responses) < expected:
        print("Source timing out!", file=sys.stderr)
    else:
        try:
            print(result.stats.report(result.last_cycle))
        except ValueError as exc:
            print(exc, file=sys.stderr)

    passed = compare_results(response_path, args.golden)
    print("SIMULATION PASSED" if passed else "SIMULATION FAILED")
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())