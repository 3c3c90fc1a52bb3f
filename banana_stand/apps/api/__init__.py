"""FastAPI surface for the skill endpoint."""
