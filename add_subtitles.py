#!/usr/bin/env python3
"""add_subtitles

Pair media files with subtitle files in one directory and mux each pair with
mkvmerge into ``<directory>/output``.

Files are matched by substring: names containing the primary token are media
files, names containing the secondary token are subtitle files. Both lists are
sorted by name and paired by position, so ``a.mkv`` goes with ``a.srt`` only if
the names sort the same way. The pairs are shown for confirmation before
anything is written.

Usage:
    python add_subtitles.py /path/to/season mkv srt jpn \
        --jobs 4 --sync \
        --config addsubs.yaml \
        --log-level INFO

Exit codes: 0 on success, a distinct non-zero code per error kind (see
exceptions.exceptions.ExitCode), 12 when some jobs failed.

With --sync each subtitle is first aligned to its video by the sync tool
(``ffs``, configurable as ``muxing.sync_tool``); a failed sync skips that mux.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from common.cli import StrictArgumentParser, add_config_arg, add_log_level_arg, parse_args_with_config, setup_logging
from common.config import Config
from common.logging import counting
from exceptions.exceptions import ExitCode, StepPreconditionError, UserCancelled
from subtitle_muxing.domain.model import BatchResult, BatchStatus
from subtitle_muxing.entrypoints.add_subtitles import add_subtitles


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = StrictArgumentParser(description="Mux subtitle files into their paired media files")
    add_config_arg(parser); add_log_level_arg(parser)
    parser.add_argument("directory", help="Directory containing media and subtitle files")
    parser.add_argument("primary_token", help="Substring identifying media files (e.g. mkv)")
    parser.add_argument("secondary_token", help="Substring identifying subtitle files (e.g. srt)")
    parser.add_argument("language", help="ISO 639-2 language code of the subtitles (e.g. jpn)")
    parser.add_argument("--jobs", type=_positive_int, help="Maximum number of concurrent muxing processes")
    parser.add_argument("--tool", help="Muxing executable (default: mkvmerge)")
    parser.add_argument("--yes", action="store_true", help="Accept the pairs without prompting")
    parser.add_argument("--sync", action="store_true", help="Sync each subtitle to its video with the sync tool (ffs) before muxing")
    return parser


def effective_config(args: argparse.Namespace, cfg: Config) -> Config:
    muxing = replace(cfg.muxing, tool=args.tool, max_workers=args.jobs, sync=args.sync)
    return replace(cfg, muxing=muxing)


def log_summary(result: BatchResult) -> None:
    logging.info("Total: %d, Succeeded: %d, Failed: %d",
                 len(result.outcomes), result.succeeded_count, len(result.failures))
    for failed in result.failures:
        logging.info("Failed (%s): %s + %s (exit %s)%s",
                     failed.failed_step, failed.pair.primary.name, failed.pair.secondary.name,
                     failed.returncode, f": {failed.error}" if failed.error else "")


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args, cfg = parse_args_with_config(
            build_parser,
            lambda cfg: {
                "log_level": cfg.logging.level,
                "jobs": cfg.muxing.max_workers,
                "tool": cfg.muxing.tool,
                "sync": cfg.muxing.sync,
            },
            argv,
        )
    except StepPreconditionError as e:
        setup_logging("INFO")
        logging.error("%s: %s", e.code, str(e))
        return int(e.exit_code)

    setup_logging(args.log_level)
    cfg = effective_config(args, cfg)

    with counting() as counter:
        try:
            result = add_subtitles(
                directory=Path(args.directory),
                primary_token=args.primary_token,
                secondary_token=args.secondary_token,
                language_code=args.language,
                cfg=cfg,
                assume_yes=args.yes,
            )
        except UserCancelled as e:
            logging.info("%s", str(e))
            return int(e.exit_code)
        except StepPreconditionError as e:
            logging.error("%s: %s", e.code, str(e))
            return int(e.exit_code)

        log_summary(result)
        logging.info("%s", counter.summary())

    if result.status is BatchStatus.PARTIAL_FAILURE:
        return int(ExitCode.JOBS_FAILED)
    return int(ExitCode.OK)


if __name__ == "__main__":
    raise SystemExit(main())
