"""Application layer – services that drive versioned entities."""
