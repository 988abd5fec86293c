"""Benchmark measurements."""

from dataclasses import dataclass, field

ABSENT = -1


@dataclass(frozen=True)
class BenchmarkMetric:
    """One line of a benchmark report."""

    name: str
    time: float  # ns/op
    throughput: float = ABSENT  # MB/s
    mem: int = ABSENT  # B/op
    allocs: int = ABSENT  # allocs/op

    @property
    def has_throughput(self) -> bool:
        return self.throughput != ABSENT

    @property
    def has_mem(self) -> bool:
        return self.mem != ABSENT and self.allocs != ABSENT

    def __str__(self) -> str:
        s = f"{self.time:15.1f} ns"
        if self.has_throughput:
            s += f" {self.throughput:18.1f} MB/s"
        if self.has_mem:
            s += f" {self.mem:15d} B mem {self.allocs:15d} allocs"
        return s

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "time_ns": self.time,
            "throughput_mb_s": self.throughput if self.has_throughput else None,
            "mem_bytes": self.mem if self.mem != ABSENT else None,
            "allocs": self.allocs if self.allocs != ABSENT else None,
        }


@dataclass(frozen=True)
class SolutionStats:
    """Benchmark results of one solution."""

    name: str
    size: int  # symbols except comments and white spaces
    benchs: dict[str, BenchmarkMetric] = field(default_factory=dict)
