"""Kernel – cross-cutting primitives shared by every layer."""
