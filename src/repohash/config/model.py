"""Config data model for Repohash runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from repohash.constants.config import DEFAULT_CHUNK_SIZE, DEFAULT_FOLLOW_LINKS, default_thread_count


@dataclass(frozen=True)
class RepohashConfig:
    """Resolved run config, shared read-only by every worker."""

    threads: int = field(default_factory=default_thread_count)
    verbose: bool = False
    dry_run: bool = False
    follow_links: bool = DEFAULT_FOLLOW_LINKS
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @property
    def effective_verbose(self) -> bool:
        """Whether per-computation notices are emitted. Dry runs always are."""
        return self.verbose or self.dry_run
