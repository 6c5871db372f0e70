# graph/codec.py
# Кодирование GraphData в JSON и обратно
#
# Ключи и порядок полей фиксированы. qps/latency/errorRate узла и
# subEdges ребра не пишутся, если равны нулю (пусты); остальные поля
# пишутся всегда, даже нулевые.

import json
import json.encoder
import math
import re
import time
from decimal import Decimal

from pydantic import ValidationError

from core.config import settings
from core.logging import get_logger
from graph.models import Node, SubEdge, Link, GraphData
from graph.schemas import GraphSchema

logger = get_logger(__name__)


class GraphDecodeError(ValueError):
    """Некорректный JSON или несовпадение типов при декодировании."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class GraphEncodeError(ValueError):
    """Значение не представимо в JSON (NaN, ±Inf)."""


# ---------------------------------------------------------------------------
# Кодирование
# ---------------------------------------------------------------------------

def node_to_dict(node: Node) -> dict:
    d = {"id": node.id, "name": node.name}
    if node.qps != 0:
        d["qps"] = node.qps
    if node.latency != 0:
        d["latency"] = node.latency
    if node.error_rate != 0:
        d["errorRate"] = node.error_rate
    return d


def sub_edge_to_dict(sub: SubEdge) -> dict:
    return {
        "name": sub.name,
        "value": sub.value,
        "errorRate": sub.error_rate,
        "latency": sub.latency,
    }


def link_to_dict(link: Link) -> dict:
    d = {
        "source": link.source,
        "target": link.target,
        "value": link.value,
        "errorRate": link.error_rate,
        "latency": link.latency,
    }
    if link.sub_edges:
        d["subEdges"] = [sub_edge_to_dict(s) for s in link.sub_edges]
    return d


def graph_to_dict(graph: GraphData) -> dict:
    """Возвращает внешнее представление графа (dict с ключами nodes/links)."""
    return {
        "nodes": [node_to_dict(n) for n in graph.nodes],
        "links": [link_to_dict(link) for link in graph.links],
    }


# ---------------------------------------------------------------------------
# Числа в JSON
# ---------------------------------------------------------------------------

_EXP_SHORT = re.compile(r"e-0(\d)$")


def format_float(value: float) -> str:
    """Текст числа как у encoding/json: 4.0 -> "4", 1e-05 -> "0.00001".

    Десятичная запись для |v| в [1e-6, 1e21), иначе экспонента
    ("1e-7", "1.5e+21"). Цифры те же, что у repr (кратчайшие).
    """
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"Out of range float values are not JSON compliant: {value!r}")
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        return _EXP_SHORT.sub(r"e-\1", repr(value))
    return format(Decimal(repr(value)).normalize(), "f")


class _GraphJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder с форматированием float через format_float."""

    def iterencode(self, o, _one_shot=False):
        if isinstance(self.indent, int):
            indent = " " * self.indent
        else:
            indent = self.indent
        if self.ensure_ascii:
            encoder = json.encoder.encode_basestring_ascii
        else:
            encoder = json.encoder.encode_basestring
        markers = {} if self.check_circular else None
        _iterencode = json.encoder._make_iterencode(
            markers, self.default, encoder, indent, format_float,
            self.key_separator, self.item_separator, self.sort_keys,
            self.skipkeys, _one_shot,
        )
        return _iterencode(o, 0)


def dumps(graph: GraphData, indent=...) -> str:
    """Кодирует граф в JSON-строку.

    indent=... берёт отступ из настроек (по умолчанию компактный вывод
    без пробелов). NaN и бесконечности -> GraphEncodeError.
    """
    if indent is ...:
        indent = settings.codec.indent
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        text = _GraphJSONEncoder(
            indent=indent,
            separators=separators,
            ensure_ascii=settings.codec.ensure_ascii,
            allow_nan=False,
        ).encode(graph_to_dict(graph))
    except ValueError as exc:
        raise GraphEncodeError(f"Graph is not JSON-encodable: {exc}") from exc
    logger.debug("graph encoded", extra={"nodes": len(graph.nodes), "links": len(graph.links)})
    return text


# ---------------------------------------------------------------------------
# Декодирование
# ---------------------------------------------------------------------------

def _format_errors(exc: ValidationError) -> list[str]:
    """Ошибки pydantic -> ["nodes.0.id: Input should be ...", ...]."""
    out = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        out.append(f"{loc}: {err['msg']}")
    return out


def graph_from_dict(data: dict) -> GraphData:
    """Декодирует dict (например, результат json.loads) в GraphData.

    Неизвестные ключи игнорируются, регистр ключей не важен,
    отсутствующие и null дают нулевые значения. Ссылочная целостность
    и уникальность id не проверяются.
    """
    started = time.perf_counter()
    try:
        graph = GraphSchema.model_validate(data).to_model()
    except ValidationError as exc:
        errors = _format_errors(exc)
        raise GraphDecodeError(f"Invalid graph data: {errors[0]}", errors) from exc
    logger.debug(
        "graph decoded",
        extra={
            "nodes": len(graph.nodes),
            "links": len(graph.links),
            "duration_ms": round((time.perf_counter() - started) * 1000, 3),
        },
    )
    return graph


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON number")


def loads(text: str | bytes) -> GraphData:
    """Декодирует JSON-строку в GraphData."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise GraphDecodeError(f"Malformed JSON: {exc}", [str(exc)]) from exc
    return graph_from_dict(data)
