from .range import RangeSpec, arange, irange

__all__ = ("RangeSpec", "arange", "irange")
