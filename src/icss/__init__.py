"""ICSS - a CSS-like style language with variables, arithmetic and conditionals."""

__version__ = "0.1.0"

from icss.config import CompilerConfig  # noqa: E402
from icss.pipeline import CompilationError, Compiler, compile_source  # noqa: E402

__all__ = [
    "__version__",
    "CompilerConfig",
    "CompilationError",
    "Compiler",
    "compile_source",
]
