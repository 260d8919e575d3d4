"""
Output Module - Result serialization and storage mapping.
"""

from .writer import (
    prepare_for_storage,
    result_to_json,
    write_result_json,
    write_storage_json
)

__all__ = [
    'prepare_for_storage',
    'result_to_json',
    'write_result_json',
    'write_storage_json',
]
