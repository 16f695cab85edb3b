"""Terminal client that reuses the in-process reply pipeline."""
from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Iterable

from replybot.config import settings
from replybot.links import ConfigurationMissing
from replybot.responder import Responder

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def answer(responder: Responder, text: str) -> None:
    plan = responder.plan(text)
    request = plan.request
    summary = (
        f"need={request.need!r} budget={request.budget} ref={request.product_ref}"
        if request
        else "no need/budget found"
    )
    print(f"Comment: {text} | {summary} | {GREEN}{plan.decision.kind}{RESET}")
    try:
        print(responder.render(plan))
    except ConfigurationMissing as exc:
        print(f"{RED}{exc}{RESET}")
    print()


def interactive_shell(responder: Responder) -> None:
    print("Interactive reply preview. Type 'exit' to quit.")
    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not text:
            continue
        if text.lower() in {"exit", "quit"}:
            return
        answer(responder, text)


def batch_mode(responder: Responder, file_path: Path) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            text = line.strip()
            if not text:
                continue
            answer(responder, text)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview replies for shopping comments")
    parser.add_argument("text", nargs="?", help="Comment text. If omitted, starts REPL mode.")
    parser.add_argument("--batch", type=Path, help="File with one comment per line")
    parser.add_argument("--tag", help="Affiliate tag, overrides AMAZON_TAG")
    args = parser.parse_args(list(argv) if argv is not None else None)

    responder = Responder.from_settings(settings)
    if args.tag:
        responder = replace(responder, links=replace(responder.links, tag=args.tag))

    if args.batch:
        batch_mode(responder, args.batch)
        return 0
    if args.text:
        answer(responder, args.text)
        return 0
    interactive_shell(responder)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
