from pattern_catalog.behavioral.command import (
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
    demo,
)


def test_demo_prints_documented_sequence(console):
    # Act
    demo(console)

    # Assert
    assert console.lines == ["Light is ON", "Light is OFF", "Light is OFF", "Light is ON"]


def test_on_command_execute_and_undo(console):
    # Arrange
    light = Light(console)
    remote = RemoteControl()
    remote.set_command(LightOnCommand(light))

    # Act & Assert
    remote.press_button()
    assert light.is_on is True
    remote.press_undo()
    assert light.is_on is False


def test_off_command_undo_turns_light_back_on(console):
    light = Light(console)
    light.on()
    command = LightOffCommand(light)

    command.execute()
    assert light.is_on is False
    command.undo()
    assert light.is_on is True


def test_remote_without_command_is_noop(console):
    remote = RemoteControl()

    remote.press_button()
    remote.press_undo()

    assert console.lines == []
