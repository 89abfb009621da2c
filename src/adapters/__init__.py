"""Adaptadores de I/O: cliente HTTP, proveedor IA y exportación."""
