#!/usr/bin/env python3
"""Generate job recommendations for one candidate"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from match_engine.exceptions import MatchEngineError
from match_engine.profiles import load_dataset
from match_engine.recommendation import JobRecommender, RecommendationOptions
from match_engine.utils import logger


def main():
    parser = argparse.ArgumentParser(description="Generate job recommendations")
    parser.add_argument("--dataset", default="data/sample_dataset.json", help="Path to dataset JSON")
    parser.add_argument("--candidate-id", required=True, help="Candidate ID")
    parser.add_argument("--limit", type=int, help="Maximum recommendations")
    parser.add_argument("--min-score", type=int, help="Minimum total score")
    parser.add_argument("--include-applied", action="store_true", help="Keep jobs already applied to")
    parser.add_argument("--output", help="Output JSON file")
    args = parser.parse_args()

    try:
        dataset = load_dataset(args.dataset)
        candidate = dataset.candidate(args.candidate_id)
    except MatchEngineError as e:
        logger.error(str(e))
        sys.exit(1)

    overrides = {"include_applied": args.include_applied}
    if args.limit is not None:
        overrides["limit"] = args.limit
    if args.min_score is not None:
        overrides["min_score"] = args.min_score

    recommender = JobRecommender()
    logger.info("Generating recommendations")
    output = recommender.recommend(
        candidate,
        dataset.jobs,
        applications=dataset.applications,
        searches=dataset.searches.get(candidate.candidate_id, []),
        options=RecommendationOptions(**overrides),
    )

    if args.output:
        with open(args.output, 'w') as f:
            f.write(output.model_dump_json(indent=2))
        logger.info(f"✓ Saved recommendations to {args.output}")
    else:
        print(json.dumps(output.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    main()
