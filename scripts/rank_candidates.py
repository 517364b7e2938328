#!/usr/bin/env python3
"""Rank candidates for one job (recruiter view)"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from match_engine.exceptions import MatchEngineError
from match_engine.matching import paginate, rank_candidates, summarize_matches
from match_engine.profiles import load_dataset
from match_engine.utils import config, logger


def main():
    parser = argparse.ArgumentParser(description="Rank candidates for a job")
    parser.add_argument("--dataset", default="data/sample_dataset.json", help="Path to dataset JSON")
    parser.add_argument("--job-id", required=True, help="Job ID")
    parser.add_argument("--min-score", type=int, default=config.ranking_min_score, help="Minimum match score")
    parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")
    parser.add_argument("--limit", type=int, default=config.page_size, help="Page size")
    parser.add_argument("--output", help="Output JSON file")
    args = parser.parse_args()

    try:
        dataset = load_dataset(args.dataset)
        job = dataset.job(args.job_id)
    except MatchEngineError as e:
        logger.error(str(e))
        sys.exit(1)

    ranked = rank_candidates(dataset.candidates, job, min_score=args.min_score)
    page = paginate(ranked, page=args.page, limit=args.limit)

    output = {
        "job_id": job.job_id,
        "job_title": job.title,
        "candidates": [item.model_dump(mode="json") for item in page.items],
        "pagination": {
            "page": page.page,
            "total_pages": page.total_pages,
            "total": page.total,
            "has_more": page.has_more
        },
        "stats": summarize_matches(len(dataset.candidates), ranked).model_dump(mode="json")
    }

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(output, f, indent=2)
        logger.info(f"✓ Saved ranking to {args.output}")
    else:
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
