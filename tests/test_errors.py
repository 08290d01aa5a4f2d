from doomview.errors import GeneralError


def test_message_is_displayed_verbatim():
    error = GeneralError("invalid window size (WIDTHxHEIGHT)")
    assert str(error) == "invalid window size (WIDTHxHEIGHT)"


def test_message_attribute_holds_text():
    error = GeneralError("invalid value for fov")
    assert error.message == "invalid value for fov"


def test_message_and_display_agree():
    error = GeneralError("boom")
    assert error.message == "boom"
    assert str(error) == error.message


def test_exception_args_hold_message():
    error = GeneralError("reading level")
    assert error.args == ("reading level",)
    assert str(error) == "reading level"