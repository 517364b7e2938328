#!/usr/bin/env python3
"""Main entry point for the candidate-job matching engine demo"""
from pathlib import Path
from rich.console import Console
from rich.table import Table

from match_engine.matching import rank_candidates
from match_engine.profiles import load_dataset
from match_engine.recommendation import JobRecommender, RecommendationOptions
from match_engine.utils import logger, config

console = Console()

SAMPLE_DATASET = "data/sample_dataset.json"


def display_recommendations(candidate_name: str, output):
    """Display recommendations in a table"""
    table = Table(title=f"Job Recommendations for {candidate_name}")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Job Title", style="magenta")
    table.add_column("Company", style="green")
    table.add_column("Total", style="yellow", width=7)
    table.add_column("Content / Collab / Recency", style="blue")
    table.add_column("Source")

    for rec in output.recommendations:
        score = rec.score_breakdown
        table.add_row(
            str(rec.rank),
            rec.job.title,
            rec.job.company or "-",
            str(score.total),
            f"{score.content} / {score.collaborative} / {score.recency}",
            rec.source.value
        )

    console.print(table)


def display_ranked_candidates(job, ranked):
    """Display recruiter view for one job"""
    table = Table(title=f"Matched Candidates for {job.title}")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Candidate", style="magenta")
    table.add_column("Score", style="yellow", width=7)
    table.add_column("Tier", style="green")
    table.add_column("Weaknesses", style="red")

    for item in ranked:
        table.add_row(
            str(item.rank),
            item.candidate.name or item.candidate.candidate_id,
            str(item.match_result.total_score),
            item.match_result.match_tier.value,
            "; ".join(item.match_result.weaknesses) or "-"
        )

    console.print(table)


def main():
    """Main workflow"""
    console.print("[bold blue]Candidate-Job Matching Engine[/bold blue]\n")

    if not Path(SAMPLE_DATASET).exists():
        logger.error(f"Sample dataset not found: {SAMPLE_DATASET}")
        return

    dataset = load_dataset(SAMPLE_DATASET)
    logger.info(f"Loaded {len(dataset.candidates)} candidates and {len(dataset.jobs)} jobs")

    recommender = JobRecommender()
    options = RecommendationOptions(limit=config.recommendation_limit, min_score=0)

    for candidate in dataset.candidates:
        output = recommender.recommend(
            candidate,
            dataset.jobs,
            applications=dataset.applications,
            searches=dataset.searches.get(candidate.candidate_id, []),
            options=options,
        )
        display_recommendations(candidate.name or candidate.candidate_id, output)

    job = dataset.jobs[0]
    ranked = rank_candidates(dataset.candidates, job, min_score=0, scorer=recommender.scorer)
    display_ranked_candidates(job, ranked)


if __name__ == "__main__":
    main()
