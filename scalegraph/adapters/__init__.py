from scalegraph.adapters.normalize import normalize_values, normalize_xy

__all__ = ["normalize_values", "normalize_xy"]
