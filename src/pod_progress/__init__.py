"""pod_progress package.

Contains the quarter-week calendar and the progress aggregation engine used
by accountability pods: mapping calendar dates onto quarter-relative weeks,
scoping goal/milestone/check-in snapshots, and computing completion rates,
weekly breakdowns and member rankings for dashboards.

Architecture:
- Snapshot (pydantic models) → Aggregation → display-ready results
- The calendar resolver is a leaf with no dependencies
- pandas is used for tabular views of the computed results
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
