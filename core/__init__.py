"""
core - Prefix Removal Core Module

Provides prefix detection, rename plan generation, file collection and rename execution.
"""

from .models_fs import (
    AppConfig,
    MatchKind,
    PrefixMatch,
    PrefixOptions,
    RenameOp,
    RenamePlan,
    DEFAULT_SEPARATORS,
)

from .log_setup import (
    get_logger,
    configure_logging,
)

from .prefix_detect import (
    common_prefix,
    majority_prefix,
    detect_prefix,
    trim_to_separator,
    is_usable_prefix,
    majority_threshold,
)

from .plan_rename import (
    plan_prefix_removal,
    build_directory_plan,
    find_collisions,
)

from .scan_files import (
    collect_files,
    group_by_directory,
    normalize_extensions,
    parse_list,
)

from .exec_rename import (
    execute_rename,
    RenameResult,
)

from .safety_checks import (
    check_rename_op,
)

from .text_match import (
    display_name,
    strip_prefix,
    is_valid_filename,
)

__all__ = [
    # Data models
    "AppConfig",
    "MatchKind",
    "PrefixMatch",
    "PrefixOptions",
    "RenameOp",
    "RenamePlan",
    "RenameResult",
    "DEFAULT_SEPARATORS",

    # Logging
    "get_logger",
    "configure_logging",

    # Prefix detection
    "common_prefix",
    "majority_prefix",
    "detect_prefix",
    "trim_to_separator",
    "is_usable_prefix",
    "majority_threshold",

    # Planning
    "plan_prefix_removal",
    "build_directory_plan",
    "find_collisions",

    # Scanning
    "collect_files",
    "group_by_directory",
    "normalize_extensions",
    "parse_list",

    # Execution
    "execute_rename",

    # Safety checks
    "check_rename_op",

    # Text processing
    "display_name",
    "strip_prefix",
    "is_valid_filename",
]
