"""Data Transfer Objects — plain containers handed back to the caller.

They carry what happened during an operation so the presentation layer
can decide what to show, without the core printing anything itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from coffeeshop.domain.model.order import Order


@dataclass(frozen=True)
class OrderReceipt:
    """Output of processing an order."""

    order: Order
    recorded: bool
    points_earned: int = 0
    loyalty_notice: bool = False  # only customers are told about points
    points_balance: int = 0
