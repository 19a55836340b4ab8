from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from dotenv import load_dotenv

from docindex.ingest.errors import IndexBuildError
from docindex.ingest.loader import DocumentLoaderConfig
from docindex.ingest.pipeline import IndexResult, build_index
from docindex.ingest.sources import discover_sources, read_file
from docindex.models.configs import ContentConfig
from docindex.orchestration.config_loader import load_content_config


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Build the documentation index for a content directory.")
    parser.add_argument("content_dir", type=Path, nargs="?", help="Directory holding markdown sources")
    parser.add_argument("--config", type=Path, default=None, help="YAML, TOML or JSON content config")
    parser.add_argument("--base", default=None, help="Key prefix (default: content directory name)")
    parser.add_argument("--pattern", default="**/*.md", help="Glob for markdown sources (default: **/*.md)")
    parser.add_argument("--output", type=Path, default=None, help="Write the JSON index here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Log every document and asset")
    args = parser.parse_args(argv)
    if args.content_dir is None and args.config is None:
        parser.error("either content_dir or --config is required")
    return args


def resolve_config(args: argparse.Namespace) -> ContentConfig:
    if args.config is None:
        return ContentConfig(content_dir=args.content_dir, base=args.base, pattern=args.pattern)

    config = load_content_config(args.config)
    updates = {}
    if args.content_dir is not None:
        updates["content_dir"] = args.content_dir
    if args.base is not None:
        updates["base"] = args.base
    return config.model_copy(update=updates) if updates else config


async def run(config: ContentConfig) -> IndexResult:
    base = config.resolved_base()
    documents, assets = discover_sources(config.content_dir, base, config.pattern)
    return await build_index(
        documents,
        assets,
        base,
        read_file,
        config=DocumentLoaderConfig(concurrency=config.concurrency),
    )


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = resolve_config(args)

    try:
        result = asyncio.run(run(config))
    except IndexBuildError as exc:
        print(f"Index build failed: {exc}", file=sys.stderr)
        return 1

    payload = json.dumps(
        [document.to_dict() for document in result.documents.values()],
        indent=2,
        ensure_ascii=False,
        default=str,
    )
    if args.output is None:
        print(payload)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload + "\n", encoding="utf-8")

    print(
        "Index complete",
        {
            "documents": len(result.documents),
            "roots": len(result.roots),
            "assets": result.assets_bound,
            "output": str(args.output) if args.output else None,
        },
        file=sys.stderr,
    )
    return 0


__all__ = ["main", "parse_args", "resolve_config", "run"]
