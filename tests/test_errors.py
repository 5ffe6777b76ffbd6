import pytest

from chromata.errors import (
    ChromataError,
    ColorSpaceNotFoundError,
    DegenerateColorError,
    HueRangeError,
    handle_error,
    print_error,
)


def test_message_without_suggestions():
    error = ChromataError("something failed")

    assert str(error) == "something failed"
    assert error.suggestions == []


def test_message_lists_suggestions():
    error = ChromataError("something failed", suggestions=["try this", "or that"])

    assert str(error) == "something failed\n\nSuggestions:\n  - try this\n  - or that"


def test_color_space_error_lists_available():
    error = ColorSpaceNotFoundError("p3", ["srgb", "ntsc"])

    assert error.message == "Unknown color space: 'p3'"
    assert "Available color spaces: ntsc, srgb" in str(error)


def test_degenerate_error_reports_components():
    error = DegenerateColorError("RGB", (0.0, -0.5, 0.0))

    assert "(0, -0.5, 0)" in error.message


def test_print_error_writes_stderr(capsys):
    print_error(HueRangeError(7.0))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Hue 7.0 outside valid range [0, 6)")
    assert "wrap_hue()" in captured.err
    assert captured.err.endswith("0 red, 2 green, 4 blue\n")
    assert not captured.err.endswith("\n\n")


def test_handle_error_returns_exit_code(capsys):
    exit_code = handle_error(HueRangeError(-1.0), "building palette")

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err.startswith("Error while building palette:\n")
    assert "Traceback" not in captured.err


def test_handle_error_prints_traceback_for_unexpected_errors(capsys):
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        exit_code = handle_error(e)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Error: boom" in captured.err
    assert "Traceback" in captured.err


@pytest.mark.parametrize("error_type", [DegenerateColorError, HueRangeError])
def test_library_errors_share_base(error_type):
    assert issubclass(error_type, ChromataError)
