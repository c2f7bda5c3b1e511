"""REST transport for stored procedure execution."""

from .auth import build_master_key_authorization
from .executor import RestStoredProcedureExecutor

__all__ = ["RestStoredProcedureExecutor", "build_master_key_authorization"]
