"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el orquestador depende del contrato del
  cliente de generación, no de Gemini.
"""
