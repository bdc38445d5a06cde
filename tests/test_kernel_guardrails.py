"""Guardrails to keep kernel free of side effects and I/O."""

import re
from pathlib import Path


FORBIDDEN_PATTERNS = {
    "argparse": re.compile(r"\bargparse\b"),
    "logging": re.compile(r"\bimport logging\b"),
    "sys.": re.compile(r"\bsys\."),
    "open(": re.compile(r"(?<![A-Za-z0-9_])open\s*\("),
    "print(": re.compile(r"(?<![A-Za-z0-9_])print\s*\("),
    "os.environ": re.compile(r"\bos\.environ\b"),
}


def test_kernel_has_no_forbidden_tokens():
    kernel_dir = Path(__file__).resolve().parents[1] / "src" / "modtrace" / "kernel"
    offenders = []

    for path in kernel_dir.glob("*.py"):
        contents = path.read_text(encoding="utf-8")
        for token, pattern in FORBIDDEN_PATTERNS.items():
            if pattern.search(contents):
                offenders.append(f"{path.name}: {token}")

    assert not offenders, "Forbidden kernel tokens found: " + ", ".join(offenders)
