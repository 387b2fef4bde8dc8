"""Protocols shared across layers."""

from booths.contracts.validators import Validator

__all__ = ["Validator"]
