"""Command-line interface for softbisim."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..core.weights import Weights
from ..matching.scorer import SimilarityScorer
from ..ml.training import WeightTrainer
from ..ml.utils import TrainingConfig, load_weights, save_weights
from ..phonetics.normalizer import PhoneticNormalizer


def _load_weights_arg(path: Optional[str]) -> Weights:
    if path is None:
        return Weights.balanced()
    return load_weights(Path(path))


def compare_command(args: argparse.Namespace) -> int:
    """Execute the compare command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    weights = _load_weights_arg(args.weights)
    scorer = SimilarityScorer(
        weights=weights,
        normalizer=PhoneticNormalizer(reduce_vowels=not args.keep_vowels),
        match_threshold=args.threshold,
    )
    result = scorer.compare(args.name1, args.name2, clamp=args.clamp)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(result)
    return 0


def normalize_command(args: argparse.Namespace) -> int:
    """Execute the normalize command."""
    normalizer = PhoneticNormalizer(reduce_vowels=not args.keep_vowels)
    for name in args.names:
        tag = normalizer.detect(name)
        print(f"{name}\t{tag.value}\t{normalizer.normalize(name, tag)}")
    return 0


def train_command(args: argparse.Namespace) -> int:
    """Execute the train command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not Path(args.data).exists():
        print(f"Error: File not found: {args.data}", file=sys.stderr)
        return 1

    config = TrainingConfig(
        model_dir=Path(args.registry) if args.registry else TrainingConfig().model_dir,
        population_size=args.population,
        generations=args.generations,
        mutation_rate=args.mutation_rate,
        random_seed=args.seed,
        n_jobs=args.n_jobs,
        time_budget=args.time_budget,
        validation_split=args.validation_split,
        reduce_vowels=not args.keep_vowels,
    )

    trainer = WeightTrainer(config)
    metrics = trainer.train(
        args.data,
        name=args.name,
        version=args.weights_version,
        register=args.registry is not None,
    )

    weights = Weights.from_dict(metrics['weights'])
    if args.output:
        save_weights(weights, Path(args.output))

    print("\n" + "=" * 60)
    print("TRAINING RESULTS")
    print("=" * 60)
    print(f"Training pairs:         {metrics['train_pairs']:,}")
    print(f"Validation pairs:       {metrics['validation_pairs']:,}")
    print(f"Generations run:        {metrics['generations_run']}")
    print(f"Train fitness:          {metrics['train_fitness']:.4f}")
    if metrics['validation_fitness'] is not None:
        print(f"Validation fitness:     {metrics['validation_fitness']:.4f}")
    print("=" * 60 + "\n")
    print(json.dumps(weights.to_dict(), indent=2))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='softbisim',
        description='Cross-script fuzzy name matching with a tunable bigram edit distance.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--keep-vowels',
        action='store_true',
        help='Skip vowel reduction during normalization'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        'compare',
        help='Compute distance and similarity between two names'
    )
    compare_parser.add_argument('name1', help='First name')
    compare_parser.add_argument('name2', help='Second name')
    compare_parser.add_argument(
        '-w', '--weights',
        help='JSON file with the nine cost coefficients (default: balanced)'
    )
    compare_parser.add_argument(
        '--clamp',
        action='store_true',
        help='Floor similarity at 0'
    )
    compare_parser.add_argument(
        '-t', '--threshold',
        type=float,
        default=0.8,
        help='Similarity needed to report a match (default: 0.8)'
    )
    compare_parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON'
    )

    # Normalize command
    normalize_parser = subparsers.add_parser(
        'normalize',
        help='Show detected language and normalized form of names'
    )
    normalize_parser.add_argument('names', nargs='+', help='Names to normalize')

    # Train command
    train_parser = subparsers.add_parser(
        'train',
        help='Tune cost weights on a CSV of labeled name pairs'
    )
    train_parser.add_argument(
        'data',
        help='CSV file with name1,name2[,is_match] columns'
    )
    train_parser.add_argument(
        '-p', '--population',
        type=int,
        default=20,
        help='Population size (default: 20)'
    )
    train_parser.add_argument(
        '-g', '--generations',
        type=int,
        default=50,
        help='Number of generations (default: 50)'
    )
    train_parser.add_argument(
        '--mutation-rate',
        type=float,
        default=0.1,
        help='Per-candidate reroll probability (default: 0.1)'
    )
    train_parser.add_argument(
        '-s', '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible runs'
    )
    train_parser.add_argument(
        '--validation-split',
        type=float,
        default=0.0,
        help='Fraction of pairs held out for validation (default: 0)'
    )
    train_parser.add_argument(
        '-j', '--n-jobs',
        type=int,
        default=1,
        help='Parallel workers for fitness evaluation (default: 1)'
    )
    train_parser.add_argument(
        '--time-budget',
        type=float,
        default=None,
        help='Stop after this many seconds, keeping the best weights so far'
    )
    train_parser.add_argument(
        '-o', '--output',
        help='Write tuned weights to this JSON file'
    )
    train_parser.add_argument(
        '--registry',
        help='Register tuned weights in this directory'
    )
    train_parser.add_argument(
        '--name',
        default='soft_bisim',
        help='Registry name (default: soft_bisim)'
    )
    train_parser.add_argument(
        '--weights-version',
        default='v1.0.0',
        help='Registry version (default: v1.0.0)'
    )

    return parser


COMMANDS = {
    'compare': compare_command,
    'normalize': normalize_command,
    'train': train_command,
}


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    # If no command specified, print help
    if not args.command:
        parser.print_help()
        return 0

    try:
        return COMMANDS[args.command](args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
