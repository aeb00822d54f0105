"""Backend API for AlertDesk."""
