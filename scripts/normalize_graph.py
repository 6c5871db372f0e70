#!/usr/bin/env python3
# scripts/normalize_graph.py
# Декодирует JSON графа и кодирует обратно: нулевые необязательные поля
# выбрасываются, обязательные дописываются, неизвестные ключи теряются.
#
# Использование:
#   python -m scripts.normalize_graph graph.json --output graph.norm.json
#   cat graph.json | python -m scripts.normalize_graph -

import argparse
import sys

from core.logging import get_logger, setup_logging
from graph.codec import GraphDecodeError, GraphEncodeError, dumps, loads

logger = get_logger(__name__)


def _read(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Нормализация JSON графа вызовов")
    parser.add_argument("input", help="Файл с графом ('-' для stdin)")
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

    try:
        graph = loads(_read(args.input))
    except GraphDecodeError as exc:
        logger.error("graph decode failed: %s", exc, extra={"source": args.input})
        for err in exc.errors:
            print(f"error: {err}", file=sys.stderr)
        return 1

    try:
        text = dumps(graph, indent=args.indent)
    except GraphEncodeError as exc:
        logger.error("graph encode failed: %s", exc, extra={"source": args.input})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(text + "\n")
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    logger.info("graph normalized", extra={
        "source": args.input, "nodes": len(graph.nodes), "links": len(graph.links),
    })
    return 0


if __name__ == "__main__":
    sys.exit(main())
