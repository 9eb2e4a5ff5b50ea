"""
brforms - Validación de formularios y documentos brasileños.

Motor de estado de formularios independiente de framework junto con
validadores de CPF, CNPJ, PIS, CEP, RG y teléfono.
"""

__version__ = "0.1.0"
