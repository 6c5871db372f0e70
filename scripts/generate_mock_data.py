#!/usr/bin/env python3
# scripts/generate_mock_data.py
# Выгрузка демонстрационного графа в JSON
#
# Использование:
#   python -m scripts.generate_mock_data --output data/sample_graph.json --indent 2
#   python -m scripts.generate_mock_data            # JSON в stdout

import argparse
import os
import sys

from core.logging import get_logger, setup_logging
from graph.codec import dumps
from graph.formatting import ValueType, format_value
from graph.sample import sample_graph

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Выгрузка демонстрационного графа вызовов в JSON"
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Путь к выходному файлу (по умолчанию stdout)",
    )
    parser.add_argument(
        "--indent", type=int, default=None,
        help="Отступ JSON (по умолчанию компактный вывод)",
    )
    args = parser.parse_args(argv)
    setup_logging()

    graph = sample_graph()
    text = dumps(graph, indent=args.indent)

    if args.output is None:
        sys.stdout.write(text + "\n")
        return 0

    # Создаём директорию если нужно
    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logger.info("sample graph written", extra={
        "source": args.output, "nodes": len(graph.nodes), "links": len(graph.links),
    })

    # Статистика
    names = {n.id: n.name for n in graph.nodes}
    print(f"Done! Wrote {len(graph.nodes)} nodes, {len(graph.links)} links to {args.output}")
    for link in graph.links:
        print(f"    {names[link.source]:10s} → {names[link.target]:10s}  "
              f"{format_value(link.value, ValueType.RATE):>8s}  "
              f"err {format_value(link.error_rate, ValueType.PERCENT):>6s}  "
              f"lat {format_value(link.latency, ValueType.SECONDS):>6s}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
