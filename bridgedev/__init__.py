"""Bridged smart-home device models with cluster attribute access, change reporting and colour helpers."""

__version__ = "0.1.0"