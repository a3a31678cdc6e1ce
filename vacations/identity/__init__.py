"""
Name: Identity Layer

Responsibilities:
  - User / role / credential shapes
  - Session engine (login, logout, current user, restore)
"""
