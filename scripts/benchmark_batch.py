#!/usr/bin/env python3
"""Load test: batch recommendations over a synthetic corpus"""
import argparse
import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from match_engine.batch_processor import BatchRecommendationProcessor
from match_engine.evaluation import SyntheticDataGenerator
from match_engine.utils import config, logger


def run_load_test(num_candidates: int, num_jobs: int, max_workers: int, output: str):
    """Measure batch throughput under load"""
    logger.info("Performance Test Configuration:")
    logger.info(f"  Candidates: {num_candidates}")
    logger.info(f"  Jobs: {num_jobs}")
    logger.info(f"  Concurrent workers: {max_workers}\n")

    corpus = SyntheticDataGenerator().generate(num_candidates, num_jobs)

    processor = BatchRecommendationProcessor(max_workers=max_workers)
    summary = processor.process_batch(corpus.candidates, corpus.jobs, corpus.applications)

    report = {
        "test_configuration": {
            "candidates": num_candidates,
            "jobs": num_jobs,
            "max_workers": max_workers
        },
        "processing_performance": {k: v for k, v in summary.items() if k != "results"}
    }

    print("\n" + "=" * 80)
    print("PERFORMANCE TEST REPORT")
    print("=" * 80)
    print(f"  Candidates Processed: {summary['successful']}/{summary['total_candidates']}")
    if summary['total_candidates']:
        print(f"  Success Rate: {summary['successful'] / summary['total_candidates'] * 100:.1f}%")
    print(f"  Cold Starts: {summary['cold_start']}")
    print(f"  Total Time: {summary['total_time_seconds']:.2f}s")
    print(f"  Throughput: {summary['throughput_candidates_per_minute']:.2f} candidates/min")
    print(f"  Avg Recommendation Time: {summary['avg_recommendation_time_seconds']:.3f}s")
    print(f"  P95 Latency: {summary['monitor']['p95_latency_sec']:.3f}s")
    print("=" * 80)

    os.makedirs(os.path.dirname(output) or ".", exist_ok=True)
    with open(output, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\nFull report saved to: {output}")


def main():
    parser = argparse.ArgumentParser(description="Batch recommendation load test")
    parser.add_argument("--num-candidates", type=int, default=100)
    parser.add_argument("--num-jobs", type=int, default=500)
    parser.add_argument("--max-workers", type=int, default=config.max_workers)
    parser.add_argument("--output", default="output/performance_report.json")
    args = parser.parse_args()
    run_load_test(args.num_candidates, args.num_jobs, args.max_workers, args.output)


if __name__ == "__main__":
    main()
