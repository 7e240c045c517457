"""
toastpos.config - User-tunable settings.
"""

from toastpos.config.settings import ToastSettings

__all__ = ["ToastSettings"]
