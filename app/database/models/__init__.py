from .admin_model import Admin

__all__ = ["Admin"]
