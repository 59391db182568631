from .java import JavaCodeChunker, JavaLanguageSupport

__all__ = ["JavaCodeChunker", "JavaLanguageSupport"]
