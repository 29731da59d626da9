# Utils package
from .helpers import (
    ensure_directory,
    generate_timestamp_id,
    get_file_extension,
    is_valid_image,
    format_file_size,
    safe_filename,
    round_half_up,
)

__all__ = [
    "ensure_directory",
    "generate_timestamp_id",
    "get_file_extension",
    "is_valid_image",
    "format_file_size",
    "safe_filename",
    "round_half_up",
]
