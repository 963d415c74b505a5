from .names import get_description
from .names import get_display_name
from .names import get_key_name
from .names import get_security_descriptor
from .names import parse_error_message
from .services import parse_config
from .services import parse_failure_settings
from .services import parse_lock_status
from .services import parse_services
from .services import parse_services_json


__all__ = [
    "get_description",
    "get_display_name",
    "get_key_name",
    "get_security_descriptor",
    "parse_config",
    "parse_error_message",
    "parse_failure_settings",
    "parse_lock_status",
    "parse_services",
    "parse_services_json",
]
