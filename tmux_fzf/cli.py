#!/usr/bin/env python3
"""
tmux-fzf - fuzzy session switcher for tmux
Command-line interface: switch-from, move-window, and the ls-switch-from
listing that fzf calls back into when it reloads.
"""

import argparse
import logging
import sys

from . import __version__, actions, ui
from .config import Settings, load_settings
from .deps import resolve_all
from .errors import TmuxFzfError, UsageError
from .models import Operation
from .picker import MOVE_PROMPT, SWITCH_PROMPT, FzfPicker, encode_candidates
from .sessions import ranked_session_names
from .tmux_controller import TmuxController

logger = logging.getLogger(__name__)

USAGE = "usage: tmux-fzf {switch-from|move-window|ls-switch-from} <current_session> [<current_window>]"
MISSING_SESSION = "You must provide the current session name as the second argument"
MISSING_WINDOW = "You must provide the current window id as the third argument"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError (exit 1) instead of exiting with 2."""

    def error(self, message):
        raise UsageError(f"{USAGE}\n{self.prog}: error: {message}")


def build_parser() -> CliArgumentParser:
    parser = CliArgumentParser(
        prog='tmux-fzf',
        description="Fuzzy-pick a tmux session to switch to or to move the current window into",
        epilog="Examples (tmux.conf):\n"
               "  bind s display-popup -E \"tmux-fzf switch-from '#{session_name}'\"\n"
               "  bind m display-popup -E \"tmux-fzf move-window '#{session_name}' '#{window_id}'\"\n"
               "\n"
               "Inside the picker: Enter picks, alt-enter uses the typed query as a new\n"
               "session name, ctrl-x kills the highlighted session.",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('-V', '--version', action='version', version=f"tmux-fzf {__version__}")
    parser.add_argument('-l', '--log-level', choices=list(LOG_LEVELS), default=None,
                        help="Logging level (default: $TMUX_FZF_LOG_LEVEL or warning)")

    subparsers = parser.add_subparsers(dest='command', title='commands', required=True)

    parser_switch = subparsers.add_parser('switch-from',
        help="Pick a session and switch the client to it")
    parser_switch.add_argument('current_session', nargs='?', default=None,
                               help="Name of the session the client is in now")

    parser_move = subparsers.add_parser('move-window',
        help="Pick a session and move the current window into it")
    parser_move.add_argument('current_session', nargs='?', default=None,
                             help="Name of the session the client is in now")
    parser_move.add_argument('current_window', nargs='?', default=None,
                             help="Id of the window to move (e.g. @3)")

    parser_ls = subparsers.add_parser('ls-switch-from',
        help="Print the ranked session list, one per line (used by the picker's reload)")
    parser_ls.add_argument('current_session', nargs='?', default=None,
                           help="Session to leave out of the list")

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=LOG_LEVELS[level],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(LOG_LEVELS[level])


def _required(value, message: str) -> str:
    if value is None:
        raise UsageError(message)
    return value


def cmd_switch_from(args, settings: Settings) -> int:
    current_session = _required(args.current_session, MISSING_SESSION)

    controller = TmuxController()
    picker = FzfPicker(controller, kill_key=settings.kill_key, query_key=settings.query_key)
    choice = picker.pick(SWITCH_PROMPT, current_session)
    actions.execute(controller, Operation.SWITCH_FROM, choice,
                    on_error=controller.display_message)
    return 0


def cmd_move_window(args, settings: Settings) -> int:
    current_session = _required(args.current_session, MISSING_SESSION)
    current_window = _required(args.current_window, MISSING_WINDOW)

    controller = TmuxController()
    picker = FzfPicker(controller, kill_key=settings.kill_key, query_key=settings.query_key)
    choice = picker.pick(MOVE_PROMPT, current_session)
    actions.execute(controller, Operation.MOVE_WINDOW, choice, current_window,
                    on_error=controller.display_message)
    return 0


def cmd_ls_switch_from(args, settings: Settings) -> int:
    current_session = _required(args.current_session, MISSING_SESSION)

    names = ranked_session_names(TmuxController(), current_session)
    sys.stdout.write(encode_candidates(names))
    sys.stdout.flush()
    return 0


COMMANDS = {
    'switch-from': cmd_switch_from,
    'move-window': cmd_move_window,
    'ls-switch-from': cmd_ls_switch_from,
}


def run(argv=None) -> int:
    settings = load_settings()
    configure_logging(settings.log_level)

    # --help and --version work without tmux or fzf
    args = build_parser().parse_args(argv)
    resolve_all()

    if args.log_level:
        logging.getLogger().setLevel(LOG_LEVELS[args.log_level])

    logger.debug("command=%s args=%s", args.command, vars(args))
    return COMMANDS[args.command](args, settings)


def main(argv=None):
    try:
        rc = run(argv)
    except TmuxFzfError as e:
        ui.log_error(str(e))
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        ui.log_warning("interrupted")
        sys.exit(130)
    sys.exit(rc)


if __name__ == '__main__':
    main()
