from icss.generator.generator import GenerationError, Generator, generate, render_literal

__all__ = ["GenerationError", "Generator", "generate", "render_literal"]
