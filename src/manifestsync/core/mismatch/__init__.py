from manifestsync.core.mismatch.detector import MismatchDetector
from manifestsync.core.mismatch.versions import (
    FILE_DEPENDENCY_PREFIX,
    is_exempt_self_reference,
    is_file_dependency,
    is_mismatched,
    is_valid_version,
)

__all__ = [
    "FILE_DEPENDENCY_PREFIX",
    "MismatchDetector",
    "is_exempt_self_reference",
    "is_file_dependency",
    "is_mismatched",
    "is_valid_version",
]
