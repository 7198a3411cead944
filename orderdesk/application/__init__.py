"""Application layer - services, interfaces, results and DTOs."""
