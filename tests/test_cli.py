"""
Tests for cli.py - Command line interface.
"""

import json
from unittest.mock import patch

import pytest

from ithkuil_gloss.cli import main


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'ithkuil-gloss' in captured.out
        assert '0.1.0' in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'Ithkuil' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1


class TestCLIGlossing:
    """Tests for glossing words from the command line."""

    def test_single_word(self, capsys):
        result = main(['khe'])
        assert result == 0
        assert capsys.readouterr().out.strip() == 'Obv/DET-ABS'

    def test_several_words(self, capsys):
        result = main(['khe', 'ïn'])
        assert result == 0
        assert capsys.readouterr().out.splitlines() == ['Obv/DET-ABS', '**n**/4₁']

    def test_error_does_not_stop_other_words(self, capsys):
        result = main(['ëha', 'khe'])
        assert result == 1
        assert capsys.readouterr().out.splitlines() == [
            'Error: Unknown VnCn: ëh',
            'Obv/DET-ABS',
        ]

    def test_precision(self, capsys):
        main(['-p', '2', 'khe'])
        assert capsys.readouterr().out.strip() == 'obviative/detrimental-absolutive'

    def test_show_defaults(self, capsys):
        main(['--show-defaults', 'la\'la'])
        assert capsys.readouterr().out.strip() == \
            'S1/PRC-**l**-STA/BSC/EXS-UNI/DEL/CSL/M/NRM-PRN'

    def test_json_output(self, capsys):
        result = main(['-j', 'khe', 'ëha'])
        assert result == 1
        data = json.loads(capsys.readouterr().out)
        assert data['precision'] == 1
        assert data['results'][0]['gloss'] == 'Obv/DET-ABS'
        assert data['results'][0]['word_type'] == 'referential'
        assert data['results'][1]['error'] == 'Unknown VnCn: ëh'

    def test_tsv_lexicon(self, capsys, roots_tsv, affixes_tsv):
        result = main(['--roots', str(roots_tsv), '--affixes', str(affixes_tsv), 'aklal', 'ïn'])
        assert result == 0
        assert capsys.readouterr().out.splitlines() == ["S1-'feline'", "'four'₁"]

    def test_database_lexicon(self, capsys, db_path, db_session, lexicon):
        from ithkuil_gloss.db.connection import store_lexicon

        store_lexicon(db_session, lexicon)
        result = main(['-d', str(db_path), 'uklal'])
        assert result == 0
        assert capsys.readouterr().out.strip() == "S3-'kitten'"


class TestCLIErrorHandling:
    """Tests for error handling."""

    def test_missing_database(self, capsys, tmp_path):
        result = main(['-d', str(tmp_path / 'missing.db'), 'khe'])
        assert result == 1
        assert 'Error' in capsys.readouterr().err

    def test_bad_tsv(self, capsys, tmp_path):
        path = tmp_path / 'affixes.tsv'
        path.write_text('n\tNUM\n', encoding='utf-8')
        result = main(['--affixes', str(path), 'khe'])
        assert result == 1
        assert 'Error loading lexicon' in capsys.readouterr().err

    def test_database_failure(self, capsys, db_path, db_session):
        from sqlalchemy.exc import OperationalError

        error = OperationalError('SELECT', {}, Exception('disk I/O error'))
        with patch('ithkuil_gloss.db.connection.load_lexicon', side_effect=error):
            result = main(['-d', str(db_path), 'khe'])

        assert result == 1
        assert 'Error loading lexicon' in capsys.readouterr().err


class TestInitDb:
    """Tests for the init-db subcommand."""

    def test_builds_database(self, capsys, tmp_path, roots_tsv, affixes_tsv):
        output = tmp_path / 'out' / 'lexicon.db'
        result = main([
            'init-db', '--roots', str(roots_tsv), '--affixes', str(affixes_tsv),
            '-o', str(output),
        ])
        assert result == 0
        assert output.exists()
        assert 'Roots:   2' in capsys.readouterr().out

        assert main(['-d', str(output), 'ïn']) == 0
        assert capsys.readouterr().out.strip() == "'four'₁"

    def test_missing_tsv(self, capsys, tmp_path, roots_tsv):
        result = main([
            'init-db', '--roots', str(roots_tsv), '--affixes', str(tmp_path / 'missing.tsv'),
            '-o', str(tmp_path / 'lexicon.db'),
        ])
        assert result == 1
        assert 'not found' in capsys.readouterr().err

    def test_refuses_to_overwrite(self, capsys, tmp_path, roots_tsv, affixes_tsv):
        output = tmp_path / 'lexicon.db'
        output.write_bytes(b'')
        with patch('builtins.input', return_value='n'):
            result = main([
                'init-db', '--roots', str(roots_tsv), '--affixes', str(affixes_tsv),
                '-o', str(output),
            ])
        assert result == 1
        assert 'Aborted' in capsys.readouterr().out

    def test_force_overwrites(self, tmp_path, roots_tsv, affixes_tsv):
        output = tmp_path / 'lexicon.db'
        args = ['init-db', '--roots', str(roots_tsv), '--affixes', str(affixes_tsv),
                '-o', str(output)]
        assert main(args) == 0
        assert main(args + ['-f']) == 0
