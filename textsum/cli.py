"""
Command-line entry points.

    textsum-rank INPUT OUTPUT PERCENTAGE   graph propagation, keep PERCENTAGE % of sentences
    textsum-freq INPUT OUTPUT COUNT        TF-ISF weights, keep COUNT sentences

Tuning (damping, iterations, stop words) comes from ``TEXTSUM_*`` environment
variables, see ``SummarizerConfig.from_env``.
"""
from __future__ import annotations
import argparse
import logging
import os
from typing import List, Optional
from .config import SummarizerConfig
from .loaders import read_text, write_summary
from .scoring import METHOD_TEXTRANK, METHOD_TFISF
from .summarize import summarize

logger = logging.getLogger(__name__)

def _setup_logging() -> None:
    level = os.getenv("TEXTSUM_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(message)s")

def _build_parser(prog: str, method: str) -> argparse.ArgumentParser:
    if method == METHOD_TEXTRANK:
        description = "Summarize a text file by graph-based sentence ranking"
        length_help = "Share of sentences to keep, as a percentage (0-100)"
        length_type = float
    else:
        description = "Summarize a text file by TF-ISF sentence weights"
        length_help = "Number of sentences to keep"
        length_type = int
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("input_file", help="Path to the document to summarize")
    parser.add_argument("output_file", help="Path the summary is written to")
    parser.add_argument("length", type=length_type, help=length_help)
    return parser

def _run(method: str, prog: str, argv: Optional[List[str]]) -> int:
    args = _build_parser(prog, method).parse_args(argv)
    _setup_logging()
    try:
        config = SummarizerConfig.from_env()
        text = read_text(args.input_file)
        selected = summarize(text, method=method, length=args.length, config=config)
        write_summary(args.output_file, selected)
    except OSError as exc:
        logger.error("I/O error: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    logger.info("Summary written to %s", args.output_file)
    logger.info("Total sentences in summary: %d", len(selected))
    return 0

def rank_main(argv: Optional[List[str]] = None) -> int:
    return _run(METHOD_TEXTRANK, "textsum-rank", argv)

def freq_main(argv: Optional[List[str]] = None) -> int:
    return _run(METHOD_TFISF, "textsum-freq", argv)
