"""Core de FitGen: dominio, configuración y pipeline de generación.

No conoce la CLI; los adaptadores concretos (HTTP/IA) se inyectan.
"""
