# graph/schemas.py
# Pydantic-схемы входящего JSON: проверка типов при декодировании

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from graph.models import Node, SubEdge, Link, GraphData, NodeID

# Строгие скаляры: "1" вместо 1 или true вместо числа: ошибка,
# целое для float допускается. int64 вне диапазона тоже ошибка.
# 1e400 (json.loads даёт inf) для метрики: ошибка.
NodeIDField = Annotated[int, Field(strict=True, ge=-(2 ** 63), le=2 ** 63 - 1)]
Metric = Annotated[float, Field(strict=True, allow_inf_nan=False)]
Text = Annotated[str, Field(strict=True)]


class WireModel(BaseModel):
    """Общие правила декодирования.

    Лишние ключи игнорируются, null равен отсутствующему ключу, элемент
    null в списке даёт нулевое значение. Ключи сравниваются без учёта
    регистра ("ErrorRate" == "errorRate"), при повторе побеждает последний.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _wire_keys(cls, data):
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        known = {(f.alias or name).lower(): f.alias or name
                 for name, f in cls.model_fields.items()}
        out = {}
        for key, value in data.items():
            if value is None or not isinstance(key, str):
                continue
            canonical = known.get(key.lower())
            if canonical is not None:
                out[canonical] = value
        return out


class NodeSchema(WireModel):
    id: NodeIDField = 0
    name: Text = ""
    qps: Metric = 0.0
    latency: Metric = 0.0
    error_rate: Metric = Field(default=0.0, alias="errorRate")

    def to_model(self) -> Node:
        return Node(id=NodeID(self.id), name=self.name, qps=self.qps,
                    latency=self.latency, error_rate=self.error_rate)


class SubEdgeSchema(WireModel):
    name: Text = ""
    value: Metric = 0.0
    error_rate: Metric = Field(default=0.0, alias="errorRate")
    latency: Metric = 0.0

    def to_model(self) -> SubEdge:
        return SubEdge(name=self.name, value=self.value,
                       error_rate=self.error_rate, latency=self.latency)


class LinkSchema(WireModel):
    source: NodeIDField = 0
    target: NodeIDField = 0
    value: Metric = 0.0
    error_rate: Metric = Field(default=0.0, alias="errorRate")
    latency: Metric = 0.0
    sub_edges: list[SubEdgeSchema] = Field(default_factory=list, alias="subEdges")

    def to_model(self) -> Link:
        return Link(
            source=NodeID(self.source),
            target=NodeID(self.target),
            value=self.value,
            error_rate=self.error_rate,
            latency=self.latency,
            sub_edges=tuple(s.to_model() for s in self.sub_edges),
        )


class GraphSchema(WireModel):
    nodes: list[NodeSchema] = Field(default_factory=list)
    links: list[LinkSchema] = Field(default_factory=list)

    def to_model(self) -> GraphData:
        return GraphData(
            nodes=[n.to_model() for n in self.nodes],
            links=[link.to_model() for link in self.links],
        )
