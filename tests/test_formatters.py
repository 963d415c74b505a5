"""Tests for formatters module."""

from sc_parser.formatters import format_failure_config
from sc_parser.formatters import format_lock_info
from sc_parser.formatters import format_service_config
from sc_parser.formatters import format_service_list
from sc_parser.models import CodeName
from sc_parser.models import FailureConfig
from sc_parser.models import LockInfo
from sc_parser.models import ServiceConfig
from sc_parser.models import ServiceRecord
from sc_parser.models import ServiceState


class TestFormatServiceList:
    """Tests for format_service_list function."""

    def test_format_empty_list(self):
        result = format_service_list([])

        assert "=== Windows Services ===" in result
        assert "Total services: 0" in result
        assert "Running: 0" in result

    def test_format_services(self):
        services = [
            ServiceRecord(
                name="AudioSrv",
                display_name="Windows Audio",
                type=CodeName(code=16, name="WIN32_OWN_PROCESS"),
                state=ServiceState.from_code(4, "RUNNING"),
                pid=2920,
            ),
            ServiceRecord(name="BITS", state=ServiceState.from_code(1, "STOPPED")),
        ]

        result = format_service_list(services)

        assert "AudioSrv" in result
        assert "4 RUNNING" in result
        assert "16 WIN32_OWN_PROCESS" in result
        assert "2920" in result
        assert "Windows Audio" in result
        assert "1 STOPPED" in result
        assert "Total services: 2" in result
        assert "Running: 1" in result

    def test_format_truncates_long_names(self):
        result = format_service_list([ServiceRecord(name="x" * 40)])

        assert "x" * 27 + "..." in result
        assert "x" * 31 not in result


class TestFormatServiceConfig:
    def test_format_config(self):
        config = ServiceConfig(
            type=CodeName(code=32, name="WIN32_SHARE_PROCESS"),
            start_type=CodeName(code=3, name="DEMAND_START"),
            bin_path=r"C:\Windows\system32\svchost.exe -k netsvcs",
            display_name="Windows Update",
            dependencies=("rpcss", "http"),
            service_start_name="LocalSystem",
        )

        result = format_service_config(config, "wuauserv")

        assert "=== Service Configuration: wuauserv ===" in result
        assert "32 WIN32_SHARE_PROCESS" in result
        assert "3 DEMAND_START" in result
        assert r"C:\Windows\system32\svchost.exe -k netsvcs" in result
        assert "  - rpcss" in result
        assert "  - http" in result

    def test_format_config_without_dependencies(self):
        result = format_service_config(ServiceConfig())

        assert "=== Service Configuration ===" in result
        assert "Dependencies:       none" in result


class TestFormatFailureConfig:
    def test_format_failure_config(self):
        result = format_failure_config(
            FailureConfig(reset_period=86400, failure_actions="RESTART -- Delay = 60000 milliseconds.")
        )

        assert "Reset Period:    86400 seconds" in result
        assert "RESTART -- Delay = 60000 milliseconds." in result


class TestFormatLockInfo:
    def test_format_unlocked(self):
        assert "Locked: no" in format_lock_info(LockInfo())

    def test_format_locked(self):
        result = format_lock_info(LockInfo(locked=True, owner="Installer", duration=12))

        assert "Locked:   yes" in result
        assert "Owner:    Installer" in result
        assert "Duration: 12 seconds" in result
