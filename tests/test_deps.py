"""
Tests for executable discovery.
"""

import os
import stat

import pytest
from unittest.mock import patch

from tmux_fzf.deps import depends, fzf_path, resolve_all, tmux_path, which
from tmux_fzf.errors import DependencyError


def make_file(path, executable=True):
    path.write_text('#!/bin/sh\n')
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    os.chmod(path, mode)
    return path


class TestWhich:
    """Tests for which()."""

    def test_finds_executable(self, tmp_path, monkeypatch):
        make_file(tmp_path / 'tmux')
        monkeypatch.setenv('PATH', str(tmp_path))
        assert which('tmux') == str(tmp_path / 'tmux')

    def test_skips_non_executable(self, tmp_path, monkeypatch):
        make_file(tmp_path / 'tmux', executable=False)
        monkeypatch.setenv('PATH', str(tmp_path))
        assert which('tmux') is None

    def test_skips_directories(self, tmp_path, monkeypatch):
        (tmp_path / 'fzf').mkdir()
        monkeypatch.setenv('PATH', str(tmp_path))
        assert which('fzf') is None

    def test_first_match_on_path_wins(self, tmp_path, monkeypatch):
        first, second = tmp_path / 'a', tmp_path / 'b'
        first.mkdir()
        second.mkdir()
        make_file(first / 'fzf')
        make_file(second / 'fzf')
        monkeypatch.setenv('PATH', os.pathsep.join([str(first), str(second)]))
        assert which('fzf') == str(first / 'fzf')


class TestDepends:
    """Tests for memoized resolution."""

    def test_missing_binary(self):
        with patch('tmux_fzf.deps.which', return_value=None):
            with pytest.raises(DependencyError, match='`fzf` not found in PATH'):
                fzf_path()

    def test_resolved_once(self):
        with patch('tmux_fzf.deps.which', return_value='/usr/bin/tmux') as mock_which:
            assert tmux_path() == '/usr/bin/tmux'
            assert tmux_path() == '/usr/bin/tmux'
        mock_which.assert_called_once_with('tmux')

    def test_resolve_all(self, fake_binaries):
        resolve_all()
        assert [c.args[0] for c in fake_binaries.call_args_list] == ['tmux', 'fzf']

    def test_resolve_all_stops_at_missing_tmux(self):
        with patch('tmux_fzf.deps.which', return_value=None):
            with pytest.raises(DependencyError) as exc_info:
                resolve_all()
        assert exc_info.value.name == 'tmux'
        assert depends.cache_info().currsize == 0
