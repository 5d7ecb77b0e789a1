"""Domain enums package."""

from moneta.domain.enums.ordering import Ordering

__all__ = ["Ordering"]
