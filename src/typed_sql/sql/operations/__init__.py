"""Statement and clause assembly on top of a dialect QueryBuilder."""

from .assembler import ClauseAssembler

__all__ = ["ClauseAssembler"]
