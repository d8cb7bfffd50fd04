"""Layer store package"""

from .query_mixin import LayerQueryMixin
from .z_order_mixin import ZOrderMixin
from .core import LayerStore

__all__ = [
    'LayerStore',
    'LayerQueryMixin',
    'ZOrderMixin',
]
