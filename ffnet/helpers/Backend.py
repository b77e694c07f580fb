# ffnet/helpers/Backend.py
import os
import numpy as np

from ..errors import ShapeError

VERBOSE_STARTUP = False  # set True to print backend details on import
USE_GPU = os.environ.get("FFNET_USE_GPU", "0") == "1"

try:
    import cupy as cp
    if VERBOSE_STARTUP:
        print("CuPy:", cp.__version__)
        print("GPU count:", cp.cuda.runtime.getDeviceCount())
    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
    except Exception as e:
        if USE_GPU:
            print(f"CuPy installed but CUDA runtime error: {e}")
            print("Falling back to CPU (NumPy)")
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False


class Backend:
    """Backend abstraction for NumPy/CuPy compatibility."""
    def __init__(self, use_gpu=False, default_float=np.float32):
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        self.default_float = default_float
        self.xp = cp if self.use_gpu else np
        if VERBOSE_STARTUP:
            print("Using GPU backend (CuPy)" if self.use_gpu else "Using CPU backend (NumPy)")

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if self.use_gpu and x is not None:
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None, copy=False):
        """
        Ensure 'x' is an array of the current backend.
        Accepts list/tuple/np/cp arrays; returns xp.ndarray.
        """
        target_xp = cp if self.use_gpu else np
        if isinstance(x, target_xp.ndarray):
            if dtype is not None and x.dtype != dtype:
                return x.astype(dtype, copy=copy)
            return x.copy() if copy else x
        if self.use_gpu and isinstance(x, np.ndarray):
            arr = cp.asarray(x)
            return arr.astype(dtype, copy=False) if dtype is not None else arr
        if (not self.use_gpu) and (cp is not None) and isinstance(x, cp.ndarray):
            arr = cp.asnumpy(x)
            return arr.astype(dtype, copy=False) if dtype is not None else arr
        arr = target_xp.asarray(x)
        if dtype is not None and arr.dtype != dtype:
            arr = arr.astype(dtype, copy=False)
        return arr

    def vector(self, x):
        """Flat float vector on the current backend."""
        return self.ravel(self.ensure_array(x, dtype=self.default_float))

    # -------- array creation --------
    def zeros(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return self.xp.zeros(*args, **kwargs)

    def full(self, shape, value, dtype=None):
        return self.xp.full(shape, value, dtype=dtype or self.default_float)

    # -------- randomness --------
    @property
    def random(self):
        return self.xp.random

    def seed(self, seed=42):
        """Seed RNG for reproducibility."""
        if self.use_gpu:
            cp.random.seed(seed)
        np.random.seed(seed)

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        return getattr(self.xp, name)


# Global backend instance - CPU unless FFNET_USE_GPU=1
backend = Backend(use_gpu=USE_GPU)


# -------- vector math on flat float vectors --------
def _same_len(x, y):
    if len(x) != len(y):
        raise ShapeError(f"vectors differ in length: {len(x)} != {len(y)}")


def normal_vector(size):
    """Vector of `size` draws from the standard normal distribution."""
    return backend.random.standard_normal(size).astype(backend.default_float)


def sum(v):
    """Sum up a vector."""
    return float(backend.to_cpu(backend.xp.sum(v)))


def dot(x, y):
    """Element-wise product and sum of two equal length vectors."""
    _same_len(x, y)
    return backend.dot(x, y)


def add(x, y):
    _same_len(x, y)
    return backend.vector(x) + backend.vector(y)


def add_scalar(x, y):
    return backend.vector(x) + y


def add_mut(x, y):
    """Element-wise addition of `y` into `x` in place."""
    _same_len(x, y)
    x += y


def product(x, y):
    _same_len(x, y)
    return backend.vector(x) * backend.vector(y)


def product_mut(x, y):
    """Element-wise product of `x` and `y`, stored in `x`."""
    _same_len(x, y)
    x *= y


def sigmoid(x):
    # exp(-x) overflows to inf for large negative x, which still yields 0
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + backend.exp(-x))
