"""
Facade gives a simple entry point to a complicated subsystem.

Booting a computer means talking to the CPU, memory and disk in a precise
order. ``ComputerFacade.start`` does that once so callers do not have to.
"""
from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "facade"

DIAGRAM = """
          +------------------+
          |  ComputerFacade  |
          +------------------+
          | start()          |
          +------------------+
            /       |      \\
           v        v       v
     +-----+   +--------+   +-----------+
     | Cpu |   | Memory |   | HardDrive |
     +-----+   +--------+   +-----------+
"""

BOOT_ADDRESS = 0x0000
BOOT_SECTOR = 0
SECTOR_SIZE = 512


class Cpu:
    def __init__(self, console: Console):
        self.console = console

    def freeze(self) -> None:
        self.console.write("CPU: freezing")

    def jump(self, position: int) -> None:
        self.console.write(f"CPU: jumping to {position:#06x}")

    def execute(self) -> None:
        self.console.write("CPU: executing")


class Memory:
    def __init__(self, console: Console):
        self.console = console

    def load(self, position: int, data: str) -> None:
        self.console.write(f"Memory: loading '{data}' at {position:#06x}")


class HardDrive:
    def __init__(self, console: Console):
        self.console = console

    def read(self, sector: int, size: int) -> str:
        self.console.write(f"HardDrive: reading {size} bytes from sector {sector}")
        return "boot loader"


class ComputerFacade:
    def __init__(self, console: Console):
        self.cpu = Cpu(console)
        self.memory = Memory(console)
        self.hard_drive = HardDrive(console)

    def start(self) -> None:
        self.cpu.freeze()
        self.memory.load(BOOT_ADDRESS, self.hard_drive.read(BOOT_SECTOR, SECTOR_SIZE))
        self.cpu.jump(BOOT_ADDRESS)
        self.cpu.execute()


@register_pattern(PATTERN_KEY, "Facade", Category.STRUCTURAL,
                  "Provide one simple interface to a set of subsystem classes.", DIAGRAM)
def demo(console: Console) -> None:
    ComputerFacade(console).start()
