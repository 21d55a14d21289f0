from .base import PrintBackend
from .cups import LpBackend, LprBackend
from .windows import PowerShellBackend, SumatraBackend, powershell_quote

__all__ = [
    "PrintBackend",
    "LpBackend",
    "LprBackend",
    "PowerShellBackend",
    "SumatraBackend",
    "powershell_quote",
]
