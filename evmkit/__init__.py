"""Ethereum virtual machine primitives and the standard precompiled contracts."""

__version__ = "0.1.0"