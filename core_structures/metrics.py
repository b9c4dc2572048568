"""Prometheus counters for cache and tree activity."""

from prometheus_client import Counter

from core_structures.config import settings

LRU_CACHE_EVENTS = Counter(
    'lru_cache_events_total',
    'LRU cache lookups and evictions',
    ['event']
)
AVL_TREE_ROTATIONS = Counter(
    'avl_tree_rotations_total',
    'AVL tree rebalancing rotations',
    ['case', 'phase']
)


def record_cache_event(event: str) -> None:
    """Count a cache event: hit, miss or eviction."""
    if settings.enable_metrics:
        LRU_CACHE_EVENTS.labels(event=event).inc()


def record_rotation(case: str, phase: str) -> None:
    """Count a rebalancing step (LL, RR, LR, RL) during insert or delete."""
    if settings.enable_metrics:
        AVL_TREE_ROTATIONS.labels(case=case, phase=phase).inc()
