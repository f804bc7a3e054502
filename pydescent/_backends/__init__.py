"""
Backend selection and management.

Provides a unified interface for the NumPy (CPU) and PyTorch backends.
"""

from .base import BackendBase, DescentResult

# CPU backend (always available)
from .cpu_backend import CPUBackend
CPU_AVAILABLE = True

# Try importing PyTorch backend (optional)
try:
    import torch
    from .torch_backend import PyTorchBackend
    PYTORCH_AVAILABLE = True
    CUDA_AVAILABLE = bool(torch.cuda.is_available())
except ImportError:
    PYTORCH_AVAILABLE = False
    CUDA_AVAILABLE = False


def get_backend(backend='auto') -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str or BackendBase
        Backend selection:
        - 'auto': PyTorch on a CUDA GPU if present, else CPU
        - 'cpu': NumPy, FP64 (reference)
        - 'pytorch': Force PyTorch (CUDA if present, else CPU)
        A BackendBase instance is returned unchanged.

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> backend = get_backend('auto')
    >>> backend = get_backend('cpu')
    """
    if isinstance(backend, BackendBase):
        return backend

    if backend == 'auto':
        if PYTORCH_AVAILABLE and CUDA_AVAILABLE:
            return PyTorchBackend(device='cuda')
        return CPUBackend()

    elif backend == 'cpu':
        return CPUBackend()

    elif backend == 'pytorch':
        if not PYTORCH_AVAILABLE:
            raise RuntimeError(
                "PyTorch backend unavailable.\n"
                "Install: pip install torch"
            )
        return PyTorchBackend()

    else:
        raise ValueError(
            f"Unknown backend: '{backend}'\n"
            f"Valid options: 'auto', 'cpu', 'pytorch'"
        )


def list_available_backends() -> list:
    """List names of available backends."""
    backends = []
    if CPU_AVAILABLE:
        backends.append('cpu')
    if PYTORCH_AVAILABLE:
        backends.append('pytorch')
    return backends


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("PyDescent Backend Status")
    print("=" * 50)
    print(f"\nAvailable Backends:")
    print(f"  CPU (FP64):     {'✓' if CPU_AVAILABLE else '✗'} - NumPy")
    print(f"  PyTorch (FP64): {'✓' if PYTORCH_AVAILABLE else '✗'} - torch tensors")
    print(f"  CUDA device:    {'✓' if CUDA_AVAILABLE else '✗'}")

    print(f"\nRecommended Backend:")
    print(f"  {get_backend('auto').name}")


__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'DescentResult',
    'CPU_AVAILABLE',
    'PYTORCH_AVAILABLE',
    'CUDA_AVAILABLE',
]
