import dataclasses

import pytest

from pattern_catalog.creational.builder import Computer, ComputerBuilder, demo


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Computer[CPU=i5, RAM=16GB, Storage=256GB]",
        "Computer[CPU=Ryzen 9, RAM=32GB, Storage=2000GB, GPU=RTX 4080]",
    ]


def test_defaults_when_nothing_set():
    computer = ComputerBuilder().build()

    assert computer == Computer(cpu="generic CPU", ram_gb=8, storage_gb=256, gpu=None)


def test_builder_methods_chain():
    builder = ComputerBuilder()

    assert builder.with_cpu("x") is builder
    assert builder.with_ram(1) is builder


def test_built_computer_is_immutable():
    computer = ComputerBuilder().build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        computer.cpu = "other"
