"""Domain value objects."""

from .value_objects import ExecutionID, OwnerSummary, ProductSnapshot, round_money
from .identity import Requester

__all__ = [
    "ExecutionID",
    "OwnerSummary",
    "ProductSnapshot",
    "Requester",
    "round_money",
]
