#!/usr/bin/env python3
"""Run evaluation pipeline on a synthetic corpus"""
import argparse
import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from match_engine.evaluation import RecommendationEvaluator, SyntheticDataGenerator
from match_engine.recommendation import JobRecommender
from match_engine.utils import logger


def main():
    parser = argparse.ArgumentParser(description="Evaluate recommendations")
    parser.add_argument("--num-candidates", type=int, default=50, help="Number of candidates")
    parser.add_argument("--num-jobs", type=int, default=100, help="Number of jobs")
    parser.add_argument("--k", type=int, default=5, help="Cut-off for ranking metrics")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", default="output/evaluation_report.json", help="Output JSON file")
    args = parser.parse_args()

    logger.info(f"Running evaluation with {args.num_candidates} candidates")

    corpus = SyntheticDataGenerator(seed=args.seed).generate(args.num_candidates, args.num_jobs)
    logger.info(f"Generated {len(corpus.jobs)} jobs and {len(corpus.applications)} applications")

    evaluator = RecommendationEvaluator(JobRecommender())
    report = evaluator.run_evaluation(corpus, k=args.k)

    print("\n" + "=" * 70)
    print("EVALUATION REPORT")
    print("=" * 70)
    print(f"Total Samples: {report['total_samples']}")
    print(f"Total Time: {report['total_time_sec']}s")
    if report.get("quality_metrics"):
        print("\nQuality Metrics:")
        for metric, values in report['quality_metrics'].items():
            print(f"  {metric}: {values['mean']:.4f} (±{values['std']:.4f})")
        print("\nCoverage:")
        for metric, value in report['coverage'].items():
            print(f"  {metric}: {value}")
        print("\nEngine Metrics:")
        for metric, value in report['engine_metrics'].items():
            print(f"  {metric}: {value}")
        print("\nPerformance Metrics:")
        for metric, value in report['performance_metrics'].items():
            print(f"  {metric}: {value}")
    print("=" * 70)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, 'w') as f:
        json.dump(report, f, indent=2)
    logger.info(f"✓ Saved report to {args.output}")


if __name__ == "__main__":
    main()
