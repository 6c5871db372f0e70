# tests/conftest.py
# Shared pytest fixtures

import logging

import pytest

from graph.models import Node, SubEdge, Link, GraphData
from graph.sample import sample_graph


@pytest.fixture
def sample_nodes():
    """Sample nodes: gateway with metrics, two services, a database without metrics"""
    return [
        Node(id=1, name="api-gateway", qps=120.0, latency=0.035, error_rate=0.01),
        Node(id=2, name="order-svc", qps=90.0, latency=0.025),
        Node(id=3, name="payment-svc", qps=40.0),
        Node(id=4, name="orders-db"),
    ]


@pytest.fixture
def sample_links():
    """Sample links, one of them broken down into sub-edges"""
    return [
        Link(source=1, target=2, value=10.5, error_rate=0.02, latency=3.1,
             sub_edges=(
                 SubEdge(name="POST /api/orders", value=6.5, error_rate=0.03, latency=3.4),
                 SubEdge(name="GET /api/orders", value=4.0, error_rate=0.0, latency=2.6),
             )),
        Link(source=2, target=3, value=4.0, error_rate=0.0, latency=0.045),
        Link(source=2, target=4, value=9.0, error_rate=0.005, latency=0.01),
    ]


@pytest.fixture
def small_graph(sample_nodes, sample_links):
    """GraphData built from sample_nodes and sample_links"""
    return GraphData(nodes=sample_nodes, links=sample_links)


@pytest.fixture
def demo_graph():
    """Six-service demo graph"""
    return sample_graph()


@pytest.fixture
def _reset_root():
    """Restore root logger handlers and level after the test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
