from .config_logging import build_logging_config, configure_logging
from .converters_scalar import format_amount, to_date, to_decimal
from .core_util import from_dict, is_null_or_whitespace, open_for_read

__all__ = [
    "build_logging_config",
    "configure_logging",
    "format_amount",
    "from_dict",
    "is_null_or_whitespace",
    "open_for_read",
    "to_date",
    "to_decimal",
]
