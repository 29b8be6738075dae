import argparse
import json
import logging
import random
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from persona_insight.config import LOG_LEVEL, SCORING_STRATEGY
from persona_insight.services.analyzer import analyze
from persona_insight.services.features import extract_features
from persona_insight.services.scoring import SCORERS


def main() -> None:
    parser = argparse.ArgumentParser(description="Estimate Big-Five traits from a block of text")
    parser.add_argument("path", nargs="?", help="UTF-8 text file to analyze (default: stdin)")
    parser.add_argument("--strategy", choices=sorted(SCORERS), default=SCORING_STRATEGY)
    parser.add_argument("--no-delay", action="store_true", help="skip the simulated processing delay")
    parser.add_argument("--seed", type=int, default=None, help="seed narrative phrasing for repeatable output")
    parser.add_argument("--features", action="store_true", help="print the extracted text features instead of the analysis")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)

    if args.path:
        text = Path(args.path).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    if args.features:
        print(json.dumps(extract_features(text).as_dict(), indent=2))
        return

    rng = random.Random(args.seed) if args.seed is not None else None

    result = analyze(text, strategy=args.strategy, rng=rng, latency=0 if args.no_delay else None)
    print(json.dumps(result.as_dict(), indent=2))


if __name__ == "__main__":
    main()
