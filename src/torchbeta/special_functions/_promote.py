"""Input promotion shared by the special functions and distributions."""

from __future__ import annotations

from typing import Union

import torch
from torch import Tensor

Number = Union[int, float]


def _promote_dtype(dtypes: list[torch.dtype]) -> torch.dtype:
    floating = [dt for dt in dtypes if dt.is_floating_point]
    if not floating:
        return torch.float64
    dtype = floating[0]
    for dt in floating[1:]:
        dtype = torch.promote_types(dtype, dt)
    # Promote low-precision to float32
    if dtype in (torch.float16, torch.bfloat16):
        return torch.float32
    return dtype


def promote_inputs(*values: Tensor | Number) -> tuple[Tensor, ...]:
    """Convert scalars and tensors to broadcast floating tensors.

    Python numbers become ``float64``. Floating tensors keep their common
    dtype, except ``float16``/``bfloat16`` which are evaluated in
    ``float32``. All outputs share the device of the first tensor input.
    """
    tensors = [v for v in values if isinstance(v, Tensor)]
    if any(t.is_complex() for t in tensors):
        raise TypeError("complex inputs are not supported")

    dtype = _promote_dtype([t.dtype for t in tensors])
    device = tensors[0].device if tensors else None

    converted = [torch.as_tensor(v, dtype=dtype, device=device) for v in values]
    return tuple(torch.broadcast_tensors(*converted))
