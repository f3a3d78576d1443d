"""User-facing interfaces."""
