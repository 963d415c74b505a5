"""Shared pytest fixtures for sc-parser tests.

The sample outputs below are captured from ``sc.exe`` on Windows Server and
trimmed to a few services. Tests that need CRLF line endings convert them
with ``str.replace("\\n", "\\r\\n")``.
"""

import logging
import textwrap

import pytest

from sc_parser.audit import log_tool_call


@pytest.fixture
def queryex_output():
    return textwrap.dedent(
        """\

        SERVICE_NAME: AudioSrv
        DISPLAY_NAME: Windows Audio
                TYPE               : 10  WIN32_OWN_PROCESS
                STATE              : 4  RUNNING
                                        (STOPPABLE, NOT_PAUSABLE, ACCEPTS_SHUTDOWN)
                WIN32_EXIT_CODE    : 0  (0x0)
                SERVICE_EXIT_CODE  : 0  (0x0)
                CHECKPOINT         : 0x0
                WAIT_HINT          : 0x0
                PID                : 2920
                FLAGS              :

        SERVICE_NAME: BITS
        DISPLAY_NAME: Background Intelligent Transfer Service
                TYPE               : 20  WIN32_SHARE_PROCESS
                STATE              : 1  STOPPED
                                        (NOT_STOPPABLE, NOT_PAUSABLE, IGNORES_SHUTDOWN)
                WIN32_EXIT_CODE    : 1077  (0x435)
                SERVICE_EXIT_CODE  : 0  (0x0)
                CHECKPOINT         : 0x0
                WAIT_HINT          : 0x7d0
                PID                : 0
                FLAGS              :
        """
    )


@pytest.fixture
def localized_query_output():
    """German sc queryex output: labels are translated, values are not."""
    return textwrap.dedent(
        """\

        DIENSTNAME: AudioSrv
        ANZEIGENAME: Windows-Audio
                TYP                : 10  WIN32_OWN_PROCESS
                STATUS             : 4  RUNNING
                                        (STOPPABLE, NOT_PAUSABLE, ACCEPTS_SHUTDOWN)
                WIN32-BEENDIGUNGSCODE : 0  (0x0)
                DIENST-BEENDIGUNGSCODE : 0  (0x0)
                PRÜFPUNKT          : 0x0
                WARTEZEIT          : 0x0
                PID                : 1234
                FLAGS              :

        DIENSTNAME: Spooler
        ANZEIGENAME: Druckwarteschlange
                TYP                : 110  WIN32_OWN_PROCESS  (interactive)
                STATUS             : 7  PAUSED
                                        (STOPPABLE, PAUSABLE, ACCEPTS_SHUTDOWN)
                WIN32-BEENDIGUNGSCODE : 0  (0x0)
                DIENST-BEENDIGUNGSCODE : 0  (0x0)
                PRÜFPUNKT          : 0x0
                WARTEZEIT          : 0x0
        """
    )


@pytest.fixture
def qc_output():
    return textwrap.dedent(
        r"""
        [SC] QueryServiceConfig SUCCESS

        SERVICE_NAME: wuauserv
                TYPE               : 20  WIN32_SHARE_PROCESS
                START_TYPE         : 3   DEMAND_START
                ERROR_CONTROL      : 1   NORMAL
                BINARY_PATH_NAME   : C:\Windows\system32\svchost.exe -k netsvcs -p
                LOAD_ORDER_GROUP   :
                TAG                : 0
                DISPLAY_NAME       : Windows Update
                DEPENDENCIES       : rpcss
                                   : http
                SERVICE_START_NAME : LocalSystem
        """
    )


@pytest.fixture
def qfailure_output():
    return textwrap.dedent(
        """
        [SC] QueryServiceConfig2 SUCCESS

        SERVICE_NAME: wuauserv
                RESET_PERIOD (in seconds)    : 86400
                REBOOT_MESSAGE               :
                COMMAND_LINE                 :
                FAILURE_ACTIONS              : RESTART -- Delay = 60000 milliseconds.
                                               RESTART -- Delay = 120000 milliseconds.
        """
    )


@pytest.fixture
def querylock_output():
    return textwrap.dedent(
        r"""
        [SC] QueryServiceLockStatus - Success
                IsLocked      : TRUE
                LockOwner     : .\NT Service Control Manager
                LockDuration  : 5 (seconds since acquired)
        """
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging() replaced its handlers."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def decorated():
    @log_tool_call
    def parse_services(*args, **kwargs):
        return args, kwargs

    return parse_services


@pytest.fixture
def adecorated():
    @log_tool_call
    async def parse_services(*args, **kwargs):
        return args, kwargs

    return parse_services


@pytest.fixture
def decorated_fail():
    @log_tool_call
    def parse_services(*args, **kwargs):
        raise ValueError("Raised intentionally")

    return parse_services


@pytest.fixture
def adecorated_fail():
    @log_tool_call
    async def parse_services(*args, **kwargs):
        raise ValueError("Raised intentionally")

    return parse_services
