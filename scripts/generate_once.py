#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _bootstrap_pythonpath() -> None:
    import sys

    src = _repo_root() / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_bootstrap_pythonpath()

from content_generator.api.schemas import FIELD_ORDER  # noqa: E402
from content_generator.config import get_settings  # noqa: E402
from content_generator.ui.state import Error, FormController, FormState, Result  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Submit one generation request to a running relay.")
    parser.add_argument("--relay-url", default="", help="Relay endpoint. Default: RELAY_URL setting.")
    parser.add_argument(
        "--input",
        default="",
        help="JSON file with topic/context/tone/audience/requirements. Flags override file values.",
    )
    for name in FIELD_ORDER:
        parser.add_argument(f"--{name}", default=None)
    return parser.parse_args()


def load_form(args: argparse.Namespace) -> FormState:
    values: dict[str, str] = {}
    if args.input:
        row = json.loads(Path(args.input).read_text(encoding="utf-8"))
        values.update({name: str(row.get(name, "")) for name in FIELD_ORDER})
    for name in FIELD_ORDER:
        flag = getattr(args, name)
        if flag is not None:
            values[name] = flag
    return FormState(**values)


async def main() -> int:
    args = parse_args()
    form = load_form(args)
    if not form.is_valid:
        missing = [name for name in FIELD_ORDER if not getattr(form, name).strip()]
        print(f"[generate] missing fields: {', '.join(missing)}")
        return 2

    controller = FormController(args.relay_url or get_settings().relay_url)
    view = await controller.submit(form)
    if isinstance(view, Result):
        print(view.text)
        return 0
    if isinstance(view, Error):
        print(f"[generate] error={view.message}")
    return 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
