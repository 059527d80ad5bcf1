"""Extract IL2CPP-generated C++ for a single C# source file."""

__version__ = "0.1.0"
