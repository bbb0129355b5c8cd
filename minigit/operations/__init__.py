"""Operations module for high-level MiniGit operations.

This module contains the business logic for:
- Status computation, commit, reset and checkout (reconcile)
- Branch management
- Commit history
- Merge (unsupported)
"""

from minigit.operations.reconcile import ReconciliationEngine, StatusReport, Changes, classify
from minigit.operations.log import LogEntry, get_commit_history

__all__ = [
    'ReconciliationEngine', 'StatusReport', 'Changes', 'classify',
    'LogEntry', 'get_commit_history',
]
