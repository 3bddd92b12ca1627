"""Service layer for Texty workflows."""
