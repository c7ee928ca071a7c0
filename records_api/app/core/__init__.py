"""Settings, logging, database access and error types."""
