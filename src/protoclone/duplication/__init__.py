"""Duplication primitives: prototype-delegating clone and shallow copy."""

from protoclone.duplication.cloning import clone
from protoclone.duplication.copying import copy, copy_dynamic
from protoclone.duplication.native import Delegate, copy_native, delegate_base, delegate_own

__all__ = [
    "clone",
    "copy",
    "copy_dynamic",
    "copy_native",
    "Delegate",
    "delegate_base",
    "delegate_own",
]
