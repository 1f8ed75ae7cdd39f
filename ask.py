#!/usr/bin/env python3
"""CLI helper to answer one travel question with the full pipeline."""

from __future__ import annotations

import argparse
from dataclasses import replace

from travel_agents import DEFAULT_QUERY, PipelineSettings, build_pipeline_from_env, configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Research, retrieve and draft a travel itinerary.")
    parser.add_argument("question", nargs="?", default=DEFAULT_QUERY, help="Travel question to answer")
    parser.add_argument("--url", default=None, help="Source page to retrieve passages from")
    parser.add_argument("--model", default=None, help="Chat model identifier")
    parser.add_argument("--top-k", type=int, default=None, help="Number of passages to retrieve")
    parser.add_argument(
        "--show-context",
        action="store_true",
        help="Also print the research context and the retrieved passages.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    settings = PipelineSettings.from_env()
    overrides = {
        key: value
        for key, value in {"source_url": args.url, "model": args.model, "top_k": args.top_k}.items()
        if value is not None
    }
    if overrides:
        settings = replace(settings, **overrides)

    result = build_pipeline_from_env(settings).run(args.question)

    if args.show_context:
        print("=== Research context ===")  # noqa: T201
        print(result.web_context)  # noqa: T201
        print(f"\n=== Retrieved passages ({len(result.documents)}) ===")  # noqa: T201
        for document in result.documents:
            print(f"[{document.score:.3f}] {document.doc_id}\n{document.content}\n")  # noqa: T201
        print("=== Answer ===")  # noqa: T201
    print(result.answer)  # noqa: T201


if __name__ == "__main__":
    main()
