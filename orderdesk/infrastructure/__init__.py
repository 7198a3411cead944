"""Infrastructure - logging and database runtime."""
