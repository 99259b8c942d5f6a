"""On-disk variants of the live script."""

from autopilot_engine.store.variants import VariantStore, atomic_write_bytes

__all__ = ["VariantStore", "atomic_write_bytes"]
