"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and constants
    ├── serialization.py  # To/from the store's JSON payloads
    └── {feature}.py      # Fetch/load functions

Only ``climate/`` exists today. A new source should:

1. Fetch through ``mosquito_suitability.services.http.session``.
2. Return an ``xarray.DataArray`` with ``(month, lat, lon)`` dims so the
   reaction norm and the analysis can consume it unchanged.
3. Get a ``@task`` and a store path in ``flows/fetch.py``, plus tests.
"""
