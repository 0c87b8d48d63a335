from pattern_catalog.structural.facade import ComputerFacade, demo


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "CPU: freezing",
        "HardDrive: reading 512 bytes from sector 0",
        "Memory: loading 'boot loader' at 0x0000",
        "CPU: jumping to 0x0000",
        "CPU: executing",
    ]


def test_facade_owns_its_subsystems(console):
    facade = ComputerFacade(console)

    assert facade.cpu.console is console
    assert facade.memory.console is console
    assert facade.hard_drive.console is console
