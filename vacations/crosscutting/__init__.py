"""
Crosscutting: configuración, logging, errores HTTP (RFC 7807) y middleware.

Sin imports eager: cada módulo se importa por su ruta completa.
"""
