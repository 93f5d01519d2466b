#!/usr/bin/env python3
"""
STT Similarity Scoring CLI

Scores a JSON request file through the same use case the HTTP API uses.

Usage:
    python run_scoring.py score request.json
    python run_scoring.py rank request.json --output ranked.json
    python run_scoring.py analyze metrics.json
    python run_scoring.py stt "고객님 서류" "고객님 셔류"
"""

import os
import sys
import json
import argparse
from pathlib import Path

from stt_sim.application.dtos import AnalyzeRequest, RankCandidatesRequest, ScorePairRequest
from stt_sim.application.use_cases import ScoreCandidateUseCase
from stt_sim.config import clear_config_cache
from stt_sim.domain.similarity.services import (
    DimensionMismatch,
    WeightLengthMismatch,
    analyze_stt_similarity,
)


def load_json(path: str) -> dict:
    """Read a JSON document from a file, or from stdin when path is '-'."""
    if path == "-":
        return json.load(sys.stdin)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(payload: dict, output: str = None):
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding='utf-8')
        print(f"Results written to: {output}")
    else:
        print(text)


def main():
    parser = argparse.ArgumentParser(
        description="STT similarity scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
    score    - one expected/candidate pair (ScorePairRequest JSON)
    rank     - one expected text vs many candidates (RankCandidatesRequest JSON)
    analyze  - summary of a metric map ({"similarities": {...}})
    stt      - composite STT similarity of two strings (no embeddings)
        """
    )
    parser.add_argument(
        "command",
        choices=["score", "rank", "analyze", "stt"],
        help="What to compute"
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Request JSON path ('-' for stdin), or two strings for 'stt'"
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the JSON result to this file instead of stdout"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Scoring config YAML (overrides STT_SIM_CONFIG)"
    )

    args = parser.parse_args()

    if args.config:
        os.environ["STT_SIM_CONFIG"] = args.config
        clear_config_cache()

    if args.command == "stt":
        if len(args.inputs) != 2:
            parser.error("'stt' takes exactly two strings")
        write_json(analyze_stt_similarity(args.inputs[0], args.inputs[1]).to_dict(), args.output)
        return 0

    use_case = ScoreCandidateUseCase.from_config()
    payload = load_json(args.inputs[0])

    try:
        if args.command == "score":
            result = use_case.execute(ScorePairRequest(**payload))
        elif args.command == "rank":
            result = use_case.rank(RankCandidatesRequest(**payload))
        else:
            result = use_case.analyze(AnalyzeRequest(**payload).similarities)
    except (DimensionMismatch, WeightLengthMismatch) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    write_json(result.model_dump(), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
