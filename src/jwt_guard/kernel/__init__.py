"""Kernel – errors, time and value types shared by every layer."""
