"""Field-group models, validation and helpers for registry configuration."""

__version__ = "0.1.0"
__all__ = ["shared", "fieldgroups"]