from .tenant import Tenant

__all__ = ["Tenant"]
