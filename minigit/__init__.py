"""MiniGit - a minimal local version control system implemented in Python."""

__version__ = '0.1.0'

from minigit.core.repository import Repository
from minigit.core.objects import Blob, Tree, Commit
from minigit.git import MiniGit

__all__ = [
    'MiniGit',
    'Repository',
    'Blob',
    'Tree',
    'Commit',
]
