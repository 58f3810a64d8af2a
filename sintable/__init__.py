from .config import ResetMode, SineTableConfig, Strategy
from .direct import sintable
from .errors import PreconditionError, ResourceLimitError, SinTableError
from .generate import generate
from .quarter import quarterwav
from .table import build_table

__all__ = [
    "ResetMode", "SineTableConfig", "Strategy",
    "PreconditionError", "ResourceLimitError", "SinTableError",
    "build_table", "generate", "quarterwav", "sintable",
]
