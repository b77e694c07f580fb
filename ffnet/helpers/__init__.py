from .Backend import (
    Backend,
    backend,
    normal_vector,
    sum,
    dot,
    add,
    add_scalar,
    add_mut,
    product,
    product_mut,
    sigmoid,
)
from .logger import RunLogger
