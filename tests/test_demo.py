"""Tests for the printed walkthroughs."""

import structlog

from core_structures import demo
from core_structures.config import settings


def test_lru_cache_demo(capsys):
    cache = demo.run_lru_cache_demo()
    out = capsys.readouterr().out
    
    assert cache.items() == [(5, 500), (1, 150), (4, 400)]
    assert "Get key 1: 100" in out
    assert "Get key 2 (evicted): -1" in out
    assert "Current Cache (MRU to LRU): (4,400) (1,100) (3,300)" in out


def test_avl_tree_demo(capsys):
    tree = demo.run_avl_tree_demo()
    out = capsys.readouterr().out
    
    assert tree.inorder() == [10, 25, 40, 50]
    assert "Level Order Traversal: [30, 20, 40, 10, 25, 50]" in out
    assert "Search for 25: True" in out
    assert "Search for 55: False" in out
    assert "Height of balanced tree with 10 elements: 4" in out
    assert "Is valid AVL tree: False" not in out


def test_main_runs_both_walkthroughs(capsys, restore_structlog):
    demo.main()
    out = capsys.readouterr().out
    assert "LRU CACHE" in out
    assert "AVL TREE" in out


def test_main_configures_structlog(monkeypatch, restore_structlog):
    monkeypatch.setattr(settings, "log_json", True)
    demo.main()
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
