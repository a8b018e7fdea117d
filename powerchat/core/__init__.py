"""Core message model for powerchat."""
