from hyprdash.message import LaunchApp, ToggleSettings


def describe(message):
    match message:
        case LaunchApp(command=command):
            return ("launch", command)
        case ToggleSettings():
            return ("toggle", None)
    return ("unknown", None)


def test_launch_app_holds_command():
    assert LaunchApp("firefox").command == "firefox"


def test_launch_app_equality_by_command():
    assert LaunchApp("a") == LaunchApp("a")
    assert LaunchApp("a") != LaunchApp("b")


def test_toggle_settings_instances_are_equal():
    assert ToggleSettings() == ToggleSettings()
    assert len({ToggleSettings(), ToggleSettings()}) == 1


def test_messages_can_be_matched():
    assert describe(LaunchApp("kitty")) == ("launch", "kitty")
    assert describe(ToggleSettings()) == ("toggle", None)


def test_messages_are_hashable_and_distinct():
    messages = {LaunchApp("x"), LaunchApp("x"), ToggleSettings()}
    assert len(messages) == 2