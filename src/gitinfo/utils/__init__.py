"""Utilities used across gitinfo."""

from ._concurrency import unwrap_single_error
from ._git import decode_bytes, decode_path, remote_tracking_ref
from ._logging import LogFormatType, create_cli_logger, create_logger
from ._paths import get_project_config_file, get_user_config_file

__all__ = [
    "LogFormatType",
    "create_cli_logger",
    "create_logger",
    "decode_bytes",
    "decode_path",
    "get_project_config_file",
    "get_user_config_file",
    "remote_tracking_ref",
    "unwrap_single_error",
]
