"""
Pareto analysis engine: ranks spreadsheet rows by numeric weight and
classifies them into 80/20 priority tiers with human-readable guidance.

Modules
-------
valuator    : extract_number() + compute_weight() + value_records().
ranker      : rank_records() — sort, contribution and cumulative shares.
classifier  : classify_tier() + tier_bonus() + classify_records().
recommender : build_recommendations() + attach_recommendations() — Spanish
              guidance templates.
aggregator  : summarize() + build_report().
engine      : analyze_records() + analyze_text() — the linear pipeline.

All modules are pure functions over in-memory data — no I/O, no shared state.
"""
