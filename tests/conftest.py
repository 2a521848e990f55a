"""
Shared pytest fixtures for tmux_fzf tests.
"""

import subprocess

import pytest
from unittest.mock import Mock, patch

from tmux_fzf.deps import depends


@pytest.fixture(autouse=True)
def clear_dependency_cache():
    """Executable lookups are memoized per process; start every test clean."""
    depends.cache_clear()
    yield
    depends.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's TMUX_FZF_* settings out of the tests."""
    for var in ('TMUX_FZF_LOG_LEVEL', 'TMUX_FZF_KILL_KEY', 'TMUX_FZF_QUERY_KEY'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_binaries():
    """Pretend tmux and fzf live in /usr/bin."""
    with patch('tmux_fzf.deps.which', side_effect=lambda name: f'/usr/bin/{name}') as mock:
        yield mock


@pytest.fixture
def sample_session_lines():
    """
    list-sessions lines in the wire encoding (flag 0 = attached): current
    session 'main' plus attached 'work' and unattached 'scratch' and 'build'.
    """
    return [
        '0 0 work',
        '0 999 main',
        '1 50 scratch',
        '1 10 build',
    ]


@pytest.fixture
def mock_controller(sample_session_lines):
    """A TmuxController stand-in that never spawns tmux."""
    controller = Mock()
    controller.tmux = '/usr/bin/tmux'
    controller.list_session_lines.return_value = list(sample_session_lines)
    return controller


@pytest.fixture
def completed():
    """Factory for subprocess.CompletedProcess results."""
    def _completed(stdout='', returncode=0, stderr='', args=None):
        return subprocess.CompletedProcess(args=args or [], returncode=returncode,
                                           stdout=stdout, stderr=stderr)
    return _completed
