from icss.checker.checker import Checker, check
from icss.checker.rules import PROPERTY_TYPES

__all__ = ["Checker", "check", "PROPERTY_TYPES"]
