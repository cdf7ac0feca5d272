# Importing the module registers tables with Base for create_all()
from .core import (  # noqa: F401
    # Enums
    MaterialType, AuditAction,

    # Ledger
    DailyMaterialRecord,

    # Audit
    AuditLog,
)

__all__ = [
    "MaterialType", "AuditAction",
    "DailyMaterialRecord",
    "AuditLog",
]
