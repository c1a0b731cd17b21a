"""AI-backed content generation."""
