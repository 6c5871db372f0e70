# graph/models.py
# Модели: Node, SubEdge, Link, GraphData

from dataclasses import dataclass, field
from typing import NewType

# 64-битный знаковый идентификатор узла
NodeID = NewType("NodeID", int)


@dataclass(frozen=True)
class Node:
    """Узел графа: сервис с метриками.

    Уникальность id заявлена, но не проверяется: за неё отвечает тот,
    кто собирает GraphData. Имя может повторяться у разных узлов.
    """
    id: NodeID
    name: str
    qps: float = 0.0                     # не кодируется, если 0
    latency: float = 0.0                 # не кодируется, если 0
    error_rate: float = 0.0              # не кодируется, если 0


@dataclass(frozen=True)
class SubEdge:
    """Именованная составляющая ребра."""
    name: str
    value: float = 0.0
    error_rate: float = 0.0
    latency: float = 0.0


@dataclass(frozen=True)
class Link:
    """Ребро графа: направленный вызов source -> target."""
    source: NodeID                       # id узла-источника
    target: NodeID                       # id узла-приёмника
    value: float = 0.0
    error_rate: float = 0.0
    latency: float = 0.0
    sub_edges: tuple[SubEdge, ...] = ()  # порядок сохраняется

    def __post_init__(self):
        # списки приводим к tuple, чтобы Link оставался значением
        if not isinstance(self.sub_edges, tuple):
            object.__setattr__(self, "sub_edges", tuple(self.sub_edges))


@dataclass
class GraphData:
    """Граф целиком: плоские списки узлов и рёбер в порядке производителя."""
    nodes: list[Node] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)


if __name__ == "__main__":
    a = Node(id=NodeID(1), name="Frontend", qps=100, latency=0.05)
    b = Node(id=NodeID(2), name="Auth")
    link = Link(source=a.id, target=b.id, value=5, error_rate=0.002, latency=0.045,
                sub_edges=[SubEdge(name="Auth-Service1", value=1, latency=0.005)])
    g = GraphData(nodes=[a, b], links=[link])
    print(f"Node: {a}")
    print(f"Link: {link.source} -> {link.target}, sub_edges={len(link.sub_edges)}")
    print(f"GraphData: nodes={len(g.nodes)} links={len(g.links)}")
