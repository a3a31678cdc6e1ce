"""
Vacations: motor de ciclo de vida y autorización de solicitudes de vacaciones.

Capas:
  - domain: entidades, value objects, errores, política y puertos
  - identity: usuarios y sesión
  - application: casos de uso
  - infrastructure: adaptadores in-memory
  - api: adaptador HTTP (FastAPI)
"""
