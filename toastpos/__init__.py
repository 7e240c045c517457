"""
ToastPos - keeps desktop notification popups at the top-right corner.

Run with:  python -m toastpos
"""

__version__ = "1.0.0"
