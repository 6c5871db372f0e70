# graph/sample.py
# Демонстрационный граф: шесть сервисов и семь вызовов между ними

from graph.models import Node, SubEdge, Link, GraphData, NodeID

# (id, name, qps, latency_s, error_rate)
SAMPLE_NODES = [
    (1, "Frontend", 100, 0.05, 0.001),
    (2, "Auth",      80, 0.03, 0.005),
    (3, "Users",     60, 0.12, 0.002),
    (4, "Orders",    40, 0.08, 0.015),
    (5, "Products",  90, 0.04, 0.001),
    (6, "Database", 200, 0.02, 0.0005),
]

# (source, target, value, error_rate, latency_s, [(name, value, error_rate, latency_s), ...])
SAMPLE_LINKS = [
    (1, 2, 5, 0.002, 0.045, [
        ("Auth-Load-Balancer", 2, 0.001, 0.015),
        ("Auth-Load-Balancer", 2, 0.002, 0.02),   # имена могут повторяться
        ("Auth-Service1",      1, 0.0005, 0.005),
        ("Auth-Service2",      1, 0.0005, 0.005),
    ]),
    (1, 5, 8, 0.001, 0.06, [
        ("Products-API",   3, 0.0005, 0.01),
        ("Products-API",   2, 0.001, 0.03),
        ("Products-Cache", 1, 0.0005, 0.02),
    ]),
    (2, 3, 3, 0.02, 0.15, [
        ("Users-Gateway", 2, 0.015, 0.07),
        ("Users-Service", 2, 0.005, 0.06),
    ]),
    (3, 6, 4, 0.001, 0.03, []),
    (5, 6, 6, 0.001, 0.025, []),
    (1, 4, 4, 0.005, 0.09, []),
    (4, 6, 3, 0.012, 0.11, []),
]


def sample_graph() -> GraphData:
    """Возвращает новый экземпляр демонстрационного графа."""
    nodes = [
        Node(id=NodeID(i), name=name, qps=float(qps), latency=lat, error_rate=err)
        for i, name, qps, lat, err in SAMPLE_NODES
    ]
    links = [
        Link(
            source=NodeID(src),
            target=NodeID(dst),
            value=float(value),
            error_rate=err,
            latency=lat,
            sub_edges=tuple(
                SubEdge(name=n, value=float(v), error_rate=e, latency=lt)
                for n, v, e, lt in subs
            ),
        )
        for src, dst, value, err, lat, subs in SAMPLE_LINKS
    ]
    return GraphData(nodes=nodes, links=links)


if __name__ == "__main__":
    from graph.formatting import ValueType, format_value

    g = sample_graph()
    names = {n.id: n.name for n in g.nodes}
    print(f"Sample graph: nodes={len(g.nodes)} links={len(g.links)}")
    for link in sorted(g.links, key=lambda x: x.value, reverse=True):
        print(f"    {names[link.source]:10s} → {names[link.target]:10s}  "
              f"rate={format_value(link.value, ValueType.RATE):>8s}  "
              f"err={format_value(link.error_rate, ValueType.PERCENT):>6s}  "
              f"lat={format_value(link.latency, ValueType.SECONDS):>6s}  "
              f"sub={len(link.sub_edges)}")
