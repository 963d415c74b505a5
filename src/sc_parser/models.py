from enum import IntEnum

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import computed_field
from pydantic.alias_generators import to_camel


class ServiceStateCode(IntEnum):
    """Standard service state codes printed by sc query."""

    STOPPED = 1
    START_PENDING = 2
    STOP_PENDING = 3
    RUNNING = 4
    CONTINUE_PENDING = 5
    PAUSE_PENDING = 6
    PAUSED = 7


class Record(BaseModel):
    """Immutable parsed value.

    Attributes are snake_case; dumping with ``by_alias=True`` gives the
    camelCase keys consumers of the JSON form expect.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


### Shared models ###
class CodeName(Record):
    """Numeric enumeration value paired with its label, e.g. ``20  WIN32_SHARE_PROCESS``."""

    code: int = 0
    name: str = ""


class ServiceState(CodeName):
    """Service state with flags derived from the code."""

    @computed_field
    @property
    def running(self) -> bool:
        return self.code == ServiceStateCode.RUNNING

    @computed_field
    @property
    def paused(self) -> bool:
        return self.code == ServiceStateCode.PAUSED

    @computed_field
    @property
    def stopped(self) -> bool:
        return self.code == ServiceStateCode.STOPPED

    @classmethod
    def from_code(cls, code: int, name: str = "") -> "ServiceState":
        return cls(code=code, name=name)


### sc querylock ###
class LockInfo(Record):
    """Parsed service database lock status. Owner and duration only mean something while locked."""

    locked: bool = False
    owner: str = ""
    duration: int = 0


### sc qfailure ###
class FailureConfig(Record):
    """Parsed failure-recovery configuration."""

    reset_period: int = 0
    reboot_message: str = ""
    command_line: str = ""
    failure_actions: str = ""


### sc qc ###
class ServiceConfig(Record):
    """Parsed service configuration."""

    type: CodeName = Field(default_factory=CodeName)
    start_type: CodeName = Field(default_factory=CodeName)
    error_control: CodeName = Field(default_factory=CodeName)
    bin_path: str = ""
    load_order_group: str = ""
    tag: int = 0
    display_name: str = ""
    dependencies: tuple[str, ...] = ()
    service_start_name: str = ""


### sc query / sc queryex ###
class ServiceRecord(Record):
    """One service from a service listing.

    `accepted`, `pid` and `flags` stay None unless the listing prints them.
    """

    name: str = ""
    display_name: str = ""
    type: CodeName = Field(default_factory=CodeName)
    state: ServiceState = Field(default_factory=ServiceState)
    win32_exit_code: int = 0
    service_exit_code: int = 0
    checkpoint: int = 0
    wait_hint: int = 0
    accepted: tuple[str, ...] | None = None
    pid: int | None = None
    flags: str | None = None
