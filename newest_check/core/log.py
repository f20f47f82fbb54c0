from __future__ import annotations
import datetime, sys


def _stamp() -> str:
    return datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def log(*args):
    msg = " ".join(str(a) for a in args)
    print(f"[{_stamp()}] {msg}", file=sys.stdout, flush=True)


def warn(*args):
    msg = " ".join(str(a) for a in args)
    print(f"[{_stamp()}] [warn] {msg}", file=sys.stderr, flush=True)


def err(*args):
    msg = " ".join(str(a) for a in args)
    print(f"[{_stamp()}] {msg}", file=sys.stderr, flush=True)
