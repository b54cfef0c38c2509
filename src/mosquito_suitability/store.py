"""File store for fetched climate grids and derived outputs.

Two tiers under one base directory:
  - climate/: Fetched temperature grids, JSON with a metadata envelope and
    a ``valid_until`` so the fetch flow can skip fresh data.
  - derived/: Report outputs (HTML site, CSV tables), rewritten on each build.

Envelope layout::

    {"meta": {"source": ..., "fetched_at": ..., "valid_until": ...}, "data": ...}
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any


class DataStore:
    """Reads and writes store files relative to ``base_dir``."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.climate = base_dir / "climate"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any | None:
        """Return the ``data`` payload of an envelope, or None if missing."""
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Return the whole envelope (``meta`` + ``data``), or None if missing."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope

    def meta(self, path: Path) -> dict[str, Any]:
        """Return the envelope's ``meta`` block (empty if missing)."""
        envelope = self.read_raw(path) or {}
        meta: dict[str, Any] = envelope.get("meta", {})
        return meta

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write ``data`` inside a metadata envelope.

        Args:
            path: Relative path under the base (e.g. ``climate/tavg_2023.json``).
            data: JSON-compatible payload.
            source: Where the data came from (e.g. ``"open-meteo.com (archive)"``).
            valid_until: Expiry; None means the file is never considered fresh.
            **params: Extra metadata (region, resolution, year, ...).

        Returns:
            Path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {"source": source, "fetched_at": datetime.now(UTC).isoformat()}
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        meta.update(params)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)
        return full

    def write_text(self, path: Path, text: str) -> Path:
        """Write a plain-text output (HTML, CSV) without an envelope."""
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_text(text, encoding="utf-8")
        return full

    def is_fresh(self, path: Path) -> bool:
        """True if the file exists and its ``valid_until`` is in the future."""
        full = self._resolve(path)
        if not full.exists():
            return False

        valid_until = self.meta(path).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def _resolve(self, path: Path) -> Path:
        full = path if path.is_absolute() else self.base / path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
