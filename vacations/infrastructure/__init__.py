"""Infrastructure: adaptadores in-memory de repositorio, token store e identidad."""
