"""Configuration — TOML discovery, section models, and unified settings."""
