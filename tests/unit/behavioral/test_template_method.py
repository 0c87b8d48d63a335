from pattern_catalog.behavioral.template_method import Cricket, Football, demo


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Cricket Game Initialized! Start playing.",
        "Cricket Game Started. Enjoy the game!",
        "Cricket Game Finished!",
        "Football Game Initialized! Start playing.",
        "Football Game Started. Enjoy the game!",
        "Football Game Finished!",
    ]


def test_play_runs_steps_in_order(console):
    Football(console).play()

    assert [line.split()[2] for line in console.lines] == ["Initialized!", "Started.", "Finished!"]


def test_each_game_only_prints_its_own_steps(console):
    Cricket(console).play()

    assert all(line.startswith("Cricket") for line in console.lines)
