"""
Entry point for running tmux_fzf as a module.
Usage: python -m tmux_fzf <command> <current_session> [<current_window>]
"""

from .cli import main

if __name__ == '__main__':
    main()
