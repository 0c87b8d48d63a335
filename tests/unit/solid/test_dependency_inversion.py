from pattern_catalog.solid.dependency_inversion import LightBulb, Switch, Switchable, demo


class RecordingDevice(Switchable):
    def __init__(self):
        self.calls = []

    def turn_on(self):
        self.calls.append("on")

    def turn_off(self):
        self.calls.append("off")


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "LightBulb: turned on",
        "LightBulb: turned off",
        "Fan: spinning",
        "Fan: stopped",
    ]


def test_switch_works_with_any_switchable():
    device = RecordingDevice()
    switch = Switch(device)

    for _ in range(3):
        switch.operate()

    assert device.calls == ["on", "off", "on"]
    assert switch.is_on is True


def test_switch_starts_off(console):
    assert Switch(LightBulb(console)).is_on is False
