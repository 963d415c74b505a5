import pytest

from sc_parser.parsers import parse_error


@pytest.mark.parametrize(
    "stdout, expected",
    [
        ("", ""),
        ("[SC] EnumQueryServicesStatus FAILED 5:\nAccess is denied.\n", "Access is denied."),
        (
            "[SC] OpenService FAILED 1060:\r\n\r\nThe specified service does not exist as an installed service.\r\n\r\n",
            "The specified service does not exist as an installed service.",
        ),
        ("ERROR: The service name is invalid.\n", "The service name is invalid."),
        ("DESCRIPTION:\n        ERROR = insufficient buffer\n", "insufficient buffer"),
        (
            "\r\n[SC] ControlService FAILED 1062:\r\n\r\nThe service has not been started.\r\n",
            "The service has not been started.",
        ),
        ("[SC] StartService FAILED", "[SC] StartService FAILED"),
        ("Unexpected output", "Unexpected output"),
    ],
)
def test_parse_error(stdout, expected):
    assert parse_error(stdout) == expected


def test_parse_error_empty_error_field_uses_banner():
    assert parse_error("[SC] ChangeServiceConfig FAILED 87:\nThe parameter is incorrect.\nERROR:\n") == (
        "The parameter is incorrect."
    )


def test_parse_error_banner_must_lead_output():
    stdout = "Usage note: see [SC] help\nDESCRIPTION is unrelated\n"

    assert parse_error(stdout) == stdout
