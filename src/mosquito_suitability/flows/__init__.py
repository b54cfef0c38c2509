"""
Prefect flows for the suitability pipeline.

Flows:
- fetch: Sample monthly mean temperature over the region (Open-Meteo archive)
- build: Evaluate species reaction norms and write the HTML report

Usage (local):
    python -m mosquito_suitability.flows.fetch
    python -m mosquito_suitability.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m mosquito_suitability.flows.fetch
"""
