"""
Builder assembles a complex object step by step.

``ComputerBuilder`` collects parts through chained calls and only hands
out a finished, immutable ``Computer`` from ``build``. Optional parts can
be left out without a constructor that takes a dozen arguments.
"""
from dataclasses import dataclass
from typing import Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "builder"

DIAGRAM = """
+----------------------+  build()  +------------------+
|   ComputerBuilder    |---------->|     Computer     |
+----------------------+           +------------------+
| with_cpu(cpu)        |           | cpu              |
| with_ram(gb)         |           | ram_gb           |
| with_storage(gb)     |           | storage_gb       |
| with_gpu(gpu)        |           | gpu (optional)   |
| build(): Computer    |           +------------------+
+----------------------+
"""


@dataclass(frozen=True)
class Computer:
    cpu: str
    ram_gb: int
    storage_gb: int
    gpu: Optional[str] = None

    def describe(self) -> str:
        parts = [f"CPU={self.cpu}", f"RAM={self.ram_gb}GB", f"Storage={self.storage_gb}GB"]
        if self.gpu:
            parts.append(f"GPU={self.gpu}")
        return "Computer[" + ", ".join(parts) + "]"


class ComputerBuilder:
    def __init__(self):
        self._cpu = "generic CPU"
        self._ram_gb = 8
        self._storage_gb = 256
        self._gpu: Optional[str] = None

    def with_cpu(self, cpu: str) -> "ComputerBuilder":
        self._cpu = cpu
        return self

    def with_ram(self, ram_gb: int) -> "ComputerBuilder":
        self._ram_gb = ram_gb
        return self

    def with_storage(self, storage_gb: int) -> "ComputerBuilder":
        self._storage_gb = storage_gb
        return self

    def with_gpu(self, gpu: str) -> "ComputerBuilder":
        self._gpu = gpu
        return self

    def build(self) -> Computer:
        return Computer(cpu=self._cpu, ram_gb=self._ram_gb, storage_gb=self._storage_gb, gpu=self._gpu)


@register_pattern(PATTERN_KEY, "Builder", Category.CREATIONAL,
                  "Construct a complex object step by step through a fluent builder.", DIAGRAM)
def demo(console: Console) -> None:
    office = ComputerBuilder().with_cpu("i5").with_ram(16).build()
    gaming = (
        ComputerBuilder()
        .with_cpu("Ryzen 9")
        .with_ram(32)
        .with_storage(2000)
        .with_gpu("RTX 4080")
        .build()
    )
    console.write(office.describe())
    console.write(gaming.describe())
