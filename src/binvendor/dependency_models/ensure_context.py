"""
The read-only view of a dependency handed to freshness predicates, and the
predicates binvendor ships with.
"""

import os
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict


class EnsureContext(BaseModel):
    """
    What a freshness predicate may inspect to decide whether a dependency has
    to be fetched again.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    version: Optional[str] = None
    binary_directory: str = "bin"

    @property
    def binary_path(self) -> str:
        """Directory binaries are extracted into."""
        return os.path.join(self.path, self.binary_directory)


NeedsFetch = Callable[[EnsureContext], bool]


def always_fetch(context: EnsureContext) -> bool:
    return True


def binary_missing(binary_name: str) -> NeedsFetch:
    """
    Returns a predicate that requests a fetch whenever ``binary_name`` is absent
    from the dependency's binary directory.
    """

    def needs_fetch(context: EnsureContext) -> bool:
        return not os.path.exists(os.path.join(context.binary_path, binary_name))

    return needs_fetch


def version_mismatch(read_version: Callable[[EnsureContext], Optional[str]]) -> NeedsFetch:
    """
    Returns a predicate that requests a fetch whenever ``read_version`` reports a
    version different from the configured one, e.g. by running ``tool --version``.
    """

    def needs_fetch(context: EnsureContext) -> bool:
        return read_version(context) != context.version

    return needs_fetch
