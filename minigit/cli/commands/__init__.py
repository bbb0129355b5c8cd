"""CLI commands for MiniGit."""

from minigit.cli.commands.init import init_cmd
from minigit.cli.commands.add import add_cmd, rm_cmd
from minigit.cli.commands.status import status_cmd
from minigit.cli.commands.commit import commit_cmd
from minigit.cli.commands.reset import reset_cmd
from minigit.cli.commands.log import log_cmd
from minigit.cli.commands.checkout import checkout_cmd
from minigit.cli.commands.branch import branch_create_cmd, branch_remove_cmd, show_branches_cmd
from minigit.cli.commands.merge import merge_cmd
from minigit.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'rm_cmd', 'status_cmd', 'commit_cmd', 'reset_cmd',
           'log_cmd', 'checkout_cmd', 'branch_create_cmd', 'branch_remove_cmd',
           'show_branches_cmd', 'merge_cmd', 'config_cmd']
