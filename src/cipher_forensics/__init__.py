"""Inicjalizacja pakietu cipher-forensics."""

__all__ = [
    "ai",
    "analysis",
    "core",
    "detection",
    "extraction",
    "reporting",
    "shared",
    "toolkit",
]
