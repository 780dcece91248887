"""Step implementations."""

from .base import Step
from .shift_register import Branch, ShiftRegister

__all__ = ["Step", "Branch", "ShiftRegister"]
