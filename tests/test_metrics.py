"""Tests for prometheus counters."""

from core_structures.config import settings
from core_structures.in_memory_cache import LRUCache
from core_structures.trees import AVLTree


def test_cache_counts_hits_misses_and_evictions(metrics_enabled, sample_value):
    before = {
        event: sample_value("lru_cache_events_total", {"event": event})
        for event in ("hit", "miss", "eviction")
    }
    
    cache = LRUCache(1)
    cache.put(1, 1)
    cache.get(1)
    cache.get(2)
    cache.put(2, 2)
    
    assert sample_value("lru_cache_events_total", {"event": "hit"}) == before["hit"] + 1
    assert sample_value("lru_cache_events_total", {"event": "miss"}) == before["miss"] + 1
    assert sample_value("lru_cache_events_total", {"event": "eviction"}) == before["eviction"] + 1


def test_tree_counts_rotations_by_case_and_phase(metrics_enabled, sample_value):
    labels_rr_insert = {"case": "RR", "phase": "insert"}
    labels_rl_delete = {"case": "RL", "phase": "delete"}
    rr_before = sample_value("avl_tree_rotations_total", labels_rr_insert)
    rl_before = sample_value("avl_tree_rotations_total", labels_rl_delete)
    
    AVLTree([10, 20, 30])
    tree = AVLTree([20, 10, 30, 25])
    tree.delete(10)
    
    assert sample_value("avl_tree_rotations_total", labels_rr_insert) == rr_before + 1
    assert sample_value("avl_tree_rotations_total", labels_rl_delete) == rl_before + 1


def test_disabled_metrics_record_nothing(monkeypatch, sample_value):
    monkeypatch.setattr(settings, "enable_metrics", False)
    before = sample_value("lru_cache_events_total", {"event": "miss"})
    LRUCache(1).get("absent")
    assert sample_value("lru_cache_events_total", {"event": "miss"}) == before
