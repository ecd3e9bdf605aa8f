from .logging import (
    console,
    info,
    warning,
    error,
    debug,
    success,
    set_verbose,
    is_verbose,
    print_exception,
    log_exception
)
from .config import DamaConfig, DEFAULT_CONFIG

__all__ = [
    # Logging
    "console",
    "info",
    "warning",
    "error",
    "debug",
    "success",
    "set_verbose",
    "is_verbose",
    "print_exception",
    "log_exception",
    # Config
    "DamaConfig",
    "DEFAULT_CONFIG"
]
