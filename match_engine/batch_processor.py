"""Batch recommendation processing with concurrency"""
import json
import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .profiles.models import ApplicationRecord, CandidateProfile, JobPosting, SearchRecord
from .recommendation.models import RecommendationOptions, RecommendationOutput
from .recommendation.recommender import JobRecommender
from .utils import PerformanceMonitor, config, logger


@dataclass
class ProcessingResult:
    """Result of recommending jobs to a single candidate"""
    candidate_id: str
    success: bool
    recommendation_time: float
    num_recommendations: int
    cold_start: bool = False
    error: str = None


class BatchRecommendationProcessor:
    """Generate recommendations for many candidates concurrently.

    The engine keeps no shared mutable state, so worker threads share one
    JobRecommender without locking.
    """

    def __init__(self, max_workers: int = None, recommender: JobRecommender = None, output_dir: str = None):
        self.recommender = recommender or JobRecommender()
        self.max_workers = max_workers or config.max_workers
        self.output_dir = output_dir
        self.monitor = PerformanceMonitor()

    def process_single(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        applications: Sequence[ApplicationRecord],
        searches: Sequence[SearchRecord] = (),
        options: Optional[RecommendationOptions] = None,
    ) -> ProcessingResult:
        """Recommend jobs to one candidate; failures are reported, not raised"""
        start = time.perf_counter()
        try:
            output: RecommendationOutput = self.monitor.measure(self.recommender.recommend)(
                candidate, jobs, applications=applications, searches=searches, options=options
            )
        except Exception as e:
            logger.error(f"Error recommending for {candidate.candidate_id}: {e}")
            return ProcessingResult(
                candidate_id=candidate.candidate_id,
                success=False,
                recommendation_time=time.perf_counter() - start,
                num_recommendations=0,
                error=str(e)
            )

        if self.output_dir:
            os.makedirs(self.output_dir, exist_ok=True)
            with open(os.path.join(self.output_dir, f"{candidate.candidate_id}.json"), "w") as f:
                f.write(output.model_dump_json(indent=2))

        return ProcessingResult(
            candidate_id=candidate.candidate_id,
            success=True,
            recommendation_time=time.perf_counter() - start,
            num_recommendations=len(output.recommendations),
            cold_start=output.stats.cold_start
        )

    def process_batch(
        self,
        candidates: Sequence[CandidateProfile],
        jobs: Sequence[JobPosting],
        applications: Sequence[ApplicationRecord] = (),
        searches: Dict[str, List[SearchRecord]] = None,
        options: Optional[RecommendationOptions] = None,
    ) -> Dict:
        """Recommend jobs to every candidate concurrently"""
        logger.info(f"Processing {len(candidates)} candidates with {self.max_workers} workers")
        searches = searches or {}

        start_time = time.perf_counter()
        results = []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_id = {
                executor.submit(
                    self.process_single,
                    candidate,
                    jobs,
                    applications,
                    searches.get(candidate.candidate_id, []),
                    options,
                ): candidate.candidate_id
                for candidate in candidates
            }

            for future in as_completed(future_to_id):
                result = future.result()
                results.append(result)
                if result.success:
                    logger.info(f"✓ {result.candidate_id}: "
                                f"Time={result.recommendation_time:.3f}s, "
                                f"Recs={result.num_recommendations}")
                else:
                    logger.error(f"✗ {result.candidate_id}: {result.error}")

        total_time = time.perf_counter() - start_time

        successful = [r for r in results if r.success]
        failed = [r for r in results if not r.success]
        avg_time = sum(r.recommendation_time for r in successful) / len(successful) if successful else 0
        throughput = len(successful) / (total_time / 60) if total_time > 0 else 0

        summary = {
            "total_candidates": len(candidates),
            "successful": len(successful),
            "failed": len(failed),
            "cold_start": sum(1 for r in successful if r.cold_start),
            "total_time_seconds": round(total_time, 2),
            "avg_recommendation_time_seconds": round(avg_time, 3),
            "throughput_candidates_per_minute": round(throughput, 2),
            "monitor": self.monitor.get_report(),
            "results": [
                {
                    "candidate_id": r.candidate_id,
                    "success": r.success,
                    "recommendation_time": round(r.recommendation_time, 3),
                    "num_recommendations": r.num_recommendations,
                    "cold_start": r.cold_start,
                    "error": r.error
                }
                for r in sorted(results, key=lambda r: r.candidate_id)
            ]
        }

        if self.output_dir:
            with open(os.path.join(self.output_dir, "processing_summary.json"), "w") as f:
                json.dump(summary, f, indent=2)

        logger.info(f"Batch complete: {len(successful)}/{len(candidates)} succeeded "
                    f"in {total_time:.2f}s ({throughput:.2f} candidates/min)")

        return summary
