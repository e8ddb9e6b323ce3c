"""Framework-agnostic building blocks shared by the application services."""
