"""Character, string and byte-buffer helpers with C library semantics, plus input-code enums and graphics data types."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "strings", "transform", "mlx_keys", "mlx_types"]