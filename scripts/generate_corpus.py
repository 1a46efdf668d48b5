from __future__ import annotations

import argparse
from pathlib import Path

from fortgoto.testing import generate_document


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    text, valid, invalid, comments = generate_document(seed=args.seed, count=args.count)
    p = out_dir / f"seed_{args.seed}_count_{args.count}.f"
    p.write_text(text, encoding="utf-8")

    print(f"{p} (valid {valid}, invalid {invalid}, comments {comments})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
