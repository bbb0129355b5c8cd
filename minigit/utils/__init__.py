"""Utility modules for MiniGit."""
