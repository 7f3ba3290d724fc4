"""Branch version resolution and release configuration assembly."""

from .assembler import BranchDescriptor, ReleaseConfig, assemble, display_name
from .enumerator import list_maintenance_branches, parse_branch_listing
from .resolver import BranchVersionResolver
from .service import BranchConfigService, BranchVersion

__all__ = [
    "BranchConfigService",
    "BranchDescriptor",
    "BranchVersion",
    "BranchVersionResolver",
    "ReleaseConfig",
    "assemble",
    "display_name",
    "list_maintenance_branches",
    "parse_branch_listing",
]
