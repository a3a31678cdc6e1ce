"""Application layer: casos de uso del motor de vacaciones."""
