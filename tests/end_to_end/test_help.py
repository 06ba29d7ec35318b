import sys
from unittest.mock import patch

import pytest
from fusion_filter.constants import SUBCOMMAND
from fusion_filter.main import main


class TestHelpMenu:
    def test_main(self):
        with patch.object(sys, 'argv', ['fusion-filter', '-h']):
            with pytest.raises(SystemExit) as err:
                main()
            assert err.value.code == 0

    @pytest.mark.parametrize('command', SUBCOMMAND.values())
    def test_subcommand(self, command):
        with patch.object(sys, 'argv', ['fusion-filter', command, '-h']):
            with pytest.raises(SystemExit) as err:
                main()
            assert err.value.code == 0

    def test_version(self, capsys):
        with patch.object(sys, 'argv', ['fusion-filter', '-v']):
            with pytest.raises(SystemExit) as err:
                main()
            assert err.value.code == 0
        assert 'version' in capsys.readouterr().out

    def test_bad_option(self):
        with patch.object(sys, 'argv', ['fusion-filter', '--blargh']):
            with pytest.raises(SystemExit) as err:
                main()
            assert err.value.code != 0

    def test_filter_config_option_listed(self, capsys):
        with patch.object(sys, 'argv', ['fusion-filter', SUBCOMMAND.FILTER, '-h']):
            with pytest.raises(SystemExit):
                main()
        assert '--min_alt_pct_junction' in capsys.readouterr().out
