"""Values, operators, label IR, heap and built-in namespaces for a small scripting language."""

__version__ = "0.1.0"