"""Service layer for devtimer."""
