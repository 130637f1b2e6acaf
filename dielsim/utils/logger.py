# -*- coding: utf-8 -*-
"""
Minimal logger; replace with structlog/loguru if desired.

debug() is silent unless set_verbose(True) was called (--verbose / YAML).
"""
import sys, time

_VERBOSE = False

def set_verbose(flag: bool) -> None:
    global _VERBOSE
    _VERBOSE = bool(flag)

def _stamp() -> str:
    return time.strftime('%H:%M:%S')

def debug(msg: str):
    if _VERBOSE:
        print(f"[{_stamp()}] DEBUG: {msg}", file=sys.stderr)

def info(msg: str):  print(f"[{_stamp()}] {msg}", file=sys.stdout)
def warn(msg: str):  print(f"[{_stamp()}] WARNING: {msg}", file=sys.stderr)
def error(msg: str): print(f"[{_stamp()}] ERROR: {msg}", file=sys.stderr)
