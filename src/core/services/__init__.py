"""Servicios del Core: prompts, extracción, parseo, fallback y orquestación."""
