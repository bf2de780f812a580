"""Tests for the CLI interface."""

import json

import pytest

from softbisim.core import Weights
from softbisim.ml.utils import WeightsRegistry, load_weights, save_weights
from softbisim.ui.cli import main, create_parser


SAMPLE_PAIRS = """name1,name2,is_match
Schwarz,Schwartz,1
Шварц,Shvarts,1
Juan,Huan,1
Kowalczyk,Smith,0
"""


@pytest.fixture
def sample_pairs_file(tmp_path):
    """Create a temporary CSV of labeled pairs."""
    path = tmp_path / "pairs.csv"
    path.write_text(SAMPLE_PAIRS, encoding="utf-8")
    return path


def test_create_parser():
    """Test that the argument parser is created correctly."""
    parser = create_parser()

    assert parser is not None
    assert parser.prog == 'softbisim'


def test_cli_no_arguments():
    """Test CLI with no arguments shows help."""
    exit_code = main([])
    assert exit_code == 0


def test_cli_compare_command(capsys):
    """Test the compare command."""
    exit_code = main(['compare', 'Schwarz', 'Schwartz'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'shwrts (german)' in captured.out
    assert 'Similarity: 1.0000' in captured.out


def test_cli_compare_json(capsys):
    exit_code = main(['compare', 'Шварц', 'Shvarts', '--json'])

    assert exit_code == 0
    result = json.loads(capsys.readouterr().out)
    assert result['language1'] == 'russian'
    assert result['similarity'] == 1.0
    assert result['is_match'] is True


def test_cli_compare_with_weights_file(tmp_path, capsys):
    weights_file = save_weights(Weights(transposition=0.5), tmp_path / "weights.json")

    exit_code = main(['compare', 'xyx', 'yxy', '--weights', str(weights_file), '--json'])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)['distance'] == pytest.approx(0.5)


def test_cli_compare_bad_weights_file(tmp_path, capsys):
    weights_file = tmp_path / "weights.json"
    weights_file.write_text(json.dumps({"match": -1}))

    exit_code = main(['compare', 'a', 'b', '--weights', str(weights_file)])

    assert exit_code == 1
    assert 'Error' in capsys.readouterr().err


def test_cli_normalize_command(capsys):
    exit_code = main(['normalize', 'Schwarz', 'Шварц'])

    assert exit_code == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ['Schwarz\tgerman\tshwrts', 'Шварц\trussian\tsvrts']


def test_cli_normalize_keep_vowels(capsys):
    main(['--keep-vowels', 'normalize', 'Schwarz'])
    assert capsys.readouterr().out.strip() == 'Schwarz\tgerman\tshwarts'


def test_cli_train_command(sample_pairs_file, tmp_path, capsys):
    """Test the train command writes and registers tuned weights."""
    output = tmp_path / "tuned.json"
    registry_dir = tmp_path / "registry"

    exit_code = main([
        'train', str(sample_pairs_file),
        '-p', '4', '-g', '3', '-s', '7',
        '--output', str(output),
        '--registry', str(registry_dir),
        '--weights-version', 'v2.0.0',
    ])

    assert exit_code == 0
    captured = capsys.readouterr()
    assert 'TRAINING RESULTS' in captured.out
    assert 'Training pairs:         4' in captured.out

    tuned = load_weights(output)
    registered, info = WeightsRegistry(registry_dir).load_weights('soft_bisim')
    assert registered == tuned
    assert info['version'] == 'v2.0.0'


def test_cli_train_missing_file(tmp_path, capsys):
    exit_code = main(['train', str(tmp_path / 'missing.csv')])

    assert exit_code == 1
    assert 'File not found' in capsys.readouterr().err


def test_cli_train_invalid_config(sample_pairs_file, capsys):
    exit_code = main(['train', str(sample_pairs_file), '-p', '0'])

    assert exit_code == 1
    assert 'population_size' in capsys.readouterr().err
